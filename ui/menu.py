# ui/menu.py
from __future__ import annotations
from typing import List, Optional, Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

style = Style.from_dict({
    "prompt": "bold",
    "item": "",
    "item.active": "#00ffff bold",
})


class Selector:
    """
    Arrow-key list picker.
    ``interact`` returns the chosen index, or None when the user backs out
    with Esc, ``q`` or Ctrl-C.
    """

    def __init__(
        self,
        prompt: str,
        items: Sequence[str],
        default: int = 0,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        if not items:
            raise ValueError("Selector needs at least one item")
        self.prompt = prompt
        self.items = list(items)
        self.default = max(0, min(default, len(self.items) - 1))
        self.input = input
        self.output = output

    def render(self, active: int) -> FormattedText:
        fragments: List[tuple] = [("class:prompt", f"{self.prompt}\n")]
        for i, label in enumerate(self.items):
            if i == active:
                fragments.append(("class:item.active", f"> {label}\n"))
            else:
                fragments.append(("class:item", f"  {label}\n"))
        return FormattedText(fragments)

    def interact(self) -> Optional[int]:
        active = self.default
        last = len(self.items) - 1
        kb = KeyBindings()

        @kb.add("up")
        @kb.add("k")
        def _(event):
            nonlocal active
            active = max(0, active - 1)

        @kb.add("down")
        @kb.add("j")
        def _(event):
            nonlocal active
            active = min(last, active + 1)

        @kb.add("enter")
        def _(event):
            event.app.exit(result=active)

        @kb.add("escape", eager=True)
        @kb.add("q")
        @kb.add("c-c")
        def _(event):
            event.app.exit(result=None)

        app = Application(
            layout=Layout(
                Window(
                    content=FormattedTextControl(lambda: self.render(active), show_cursor=False),
                    dont_extend_height=True,
                    always_hide_cursor=True,
                )
            ),
            key_bindings=kb,
            style=style,
            full_screen=False,
            input=self.input,
            output=self.output,
        )
        return app.run()
