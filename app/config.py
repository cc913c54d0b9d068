# app/config.py
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RoundConfig:
    word_count: int
    label: str


class GameMode(Enum):
    SHORT = RoundConfig(3, "Short text (3 words)")
    MEDIUM = RoundConfig(8, "Medium text (8 words)")
    LONG = RoundConfig(15, "Long text (15 words)")
    EXIT = RoundConfig(0, "Exit game")

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def word_count(self) -> int:
        return self.value.word_count


MENU_OPTIONS = (GameMode.SHORT, GameMode.MEDIUM, GameMode.LONG, GameMode.EXIT)
DEFAULT_OPTION_INDEX = 0

MENU_PROMPT = "Please select a game type"
TYPING_PROMPT = "Start typing to begin... (Press Enter to finish, Press ESC to quit.)"
FAREWELL = "Bye!"
WIN_MESSAGE = "GG! You win in {ms}ms"
THROUGHPUT_MESSAGE = "Character/sec: {cps:.1f}"
LOSS_MESSAGE = "You lost in {ms}ms"

LOG_FILE = "keyfast.log"

APP_TITLE = r"""
KKKKKKKKK    KKKKKKKEEEEEEEEEEEEEEEEEEEEEEYYYYYYY       YYYYYYYFFFFFFFFFFFFFFFFFFFFFF      AAA                 SSSSSSSSSSSSSSS TTTTTTTTTTTTTTTTTTTTTTT
K:::::::K    K:::::KE::::::::::::::::::::EY:::::Y       Y:::::YF::::::::::::::::::::F     A:::A              SS:::::::::::::::ST:::::::::::::::::::::T
K:::::::K    K:::::KE::::::::::::::::::::EY:::::Y       Y:::::YF::::::::::::::::::::F    A:::::A            S:::::SSSSSS::::::ST:::::::::::::::::::::T
K:::::::K   K::::::KEE::::::EEEEEEEEE::::EY::::::Y     Y::::::YFF::::::FFFFFFFFF::::F   A:::::::A           S:::::S     SSSSSSST:::::TT:::::::TT:::::T
KK::::::K  K:::::KKK  E:::::E       EEEEEEYYY:::::Y   Y:::::YYY  F:::::F       FFFFFF  A:::::::::A          S:::::S            TTTTTT  T:::::T  TTTTTT
  K:::::K K:::::K     E:::::E                Y:::::Y Y:::::Y     F:::::F              A:::::A:::::A         S:::::S                    T:::::T
  K::::::K:::::K      E::::::EEEEEEEEEE       Y:::::Y:::::Y      F::::::FFFFFFFFFF   A:::::A A:::::A         S::::SSSS                 T:::::T
  K:::::::::::K       E:::::::::::::::E        Y:::::::::Y       F:::::::::::::::F  A:::::A   A:::::A         SS::::::SSSSS            T:::::T
  K:::::::::::K       E:::::::::::::::E         Y:::::::Y        F:::::::::::::::F A:::::A     A:::::A          SSS::::::::SS          T:::::T
  K::::::K:::::K      E::::::EEEEEEEEEE          Y:::::Y         F::::::FFFFFFFFFFA:::::AAAAAAAAA:::::A            SSSSSS::::S         T:::::T
  K:::::K K:::::K     E:::::E                    Y:::::Y         F:::::F         A:::::::::::::::::::::A                S:::::S        T:::::T
KK::::::K  K:::::KKK  E:::::E       EEEEEE       Y:::::Y         F:::::F        A:::::AAAAAAAAAAAAA:::::A               S:::::S        T:::::T
K:::::::K   K::::::KEE::::::EEEEEEEE:::::E       Y:::::Y       FF:::::::FF     A:::::A             A:::::A  SSSSSSS     S:::::S      TT:::::::TT
K:::::::K    K:::::KE::::::::::::::::::::E    YYYY:::::YYYY    F::::::::FF    A:::::A               A:::::A S::::::SSSSSS:::::S      T:::::::::T
K:::::::K    K:::::KE::::::::::::::::::::E    Y:::::::::::Y    F::::::::FF   A:::::A                 A:::::AS:::::::::::::::SS       T:::::::::T
KKKKKKKKK    KKKKKKKEEEEEEEEEEEEEEEEEEEEEE    YYYYYYYYYYYYY    FFFFFFFFFFF  AAAAAAA                   AAAAAAASSSSSSSSSSSSSSS         TTTTTTTTTTT
"""
