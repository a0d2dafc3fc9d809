from typing import Optional
from typing_extensions import Protocol
from prompt_toolkit import PromptSession
from .error import PowError
from .config import Config, get_config
from .digest import HashlibDigest
from .search import SearchEngine, SearchResult, encode_text
from .formatter import to_hex, to_binary


class ConsoleIO(Protocol):
    def read_line(self, message: str) -> str:
        ...

    def write(self, text: str) -> None:
        ...


class TerminalIO(object):
    def __init__(self) -> None:
        self.session: Optional[PromptSession] = None

    def read_line(self, message: str) -> str:
        if self.session is None:
            self.session = PromptSession()
        return self.session.prompt(message + "\n")

    def write(self, text: str) -> None:
        print(text)


def parse_zero_bits(answer: str) -> int:
    try:
        bits = int(answer.strip())
    except ValueError:
        raise PowError(4, 'zero bits should be a non-negative integer, got `%s`' % answer.strip())
    if bits < 0:
        raise PowError(4, 'zero bits should be a non-negative integer, got `%s`' % answer.strip())
    return bits


def write_result(io: ConsoleIO, result: SearchResult):
    io.write("Found solution:\n" + to_hex(result.digest))
    io.write("Binary representation:" + to_binary(result.digest))
    io.write("Increment was: " + str(result.steps))


def interactive_search(io: ConsoleIO, config: Optional[Config] = None) -> SearchResult:
    if config is None:
        config = get_config()
    digest = HashlibDigest(config.algorithm)
    text = io.read_line("Enter the text to hash")
    bits = parse_zero_bits(io.read_line("How many zero bits do you want to search for?"))
    engine = SearchEngine(encode_text(text, config.encoding), bits, digest, config.stop_on_wrap)
    io.write("Searching...")
    result = engine.run()
    write_result(io, result)
    return result
