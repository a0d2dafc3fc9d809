import codecs
import logging
from typing import Optional
from dataclasses import dataclass
from typing_extensions import Literal
from .error import PowError, EncodingError, SearchExhausted
from .digest import DigestFunction, HashlibDigest
from .counter import increment, count_leading_zero_bits


@dataclass(frozen=True)
class SearchResult:
    digest: bytes
    steps: int
    data: bytes


def encode_text(text: str, encoding: str = 'utf-8') -> bytes:
    try:
        codecs.lookup(encoding)
    except LookupError:
        raise EncodingError("%s string encoding isn't supported on this system" % encoding)
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as exc:
        raise EncodingError('cannot encode text as %s: %s' % (encoding, exc.reason))
    except LookupError:
        raise EncodingError('%s is not a text encoding' % encoding)


def check_threshold(threshold):
    if isinstance(threshold, bool) or not isinstance(threshold, int):
        raise PowError(4, 'threshold should be int, got %s' % type(threshold).__name__)
    if threshold < 0:
        raise PowError(4, 'threshold should be non-negative, got %d' % threshold)


class SearchEngine(object):
    """
    Hash the buffer, count its leading zero bits and advance the buffer by one
    until a digest reaches ``threshold``.

    ``steps`` counts failed candidates and is unbounded, while the buffer wraps
    modulo ``256 ** len(buffer)``. With the default ``stop_on_wrap=False`` an
    unreachable threshold loops forever over the same candidates; with
    ``stop_on_wrap=True`` a full cycle raises :class:`SearchExhausted`.
    """

    def __init__(self, initial: bytes, threshold: int, digest: DigestFunction, stop_on_wrap: bool = False) -> None:
        check_threshold(threshold)
        self.buffer = bytearray(initial)
        self.threshold = threshold
        self.hasher = digest
        self.stop_on_wrap = stop_on_wrap
        self.steps = 0
        self.wraps = 0
        self.state: Literal['searching', 'found'] = 'searching'
        self.result: Optional[SearchResult] = None
        self._initial = bytes(initial)
        logging.debug("Search of %d byte buffer for %d zero bits with %r", len(self.buffer), threshold, digest)

    def step(self) -> Optional[SearchResult]:
        if self.state == 'found':
            return self.result
        d = self.hasher.digest(self.buffer)
        if count_leading_zero_bits(d) >= self.threshold:
            self.result = SearchResult(d, self.steps, bytes(self.buffer))
            self.state = 'found'
            logging.debug("Found solution after %d steps", self.steps)
            return self.result
        self.steps += 1
        increment(self.buffer)
        if self.buffer == self._initial:
            self._wrapped()
        return None

    def _wrapped(self):
        self.wraps += 1
        if self.stop_on_wrap:
            raise SearchExhausted(
                'no digest with %d zero bits in a full cycle of %d byte buffer' % (self.threshold, len(self.buffer)),
                self.steps
            )
        if self.wraps == 1:
            logging.warning("Buffer wrapped after %d steps, candidates will repeat", self.steps)

    def run(self) -> SearchResult:
        while True:
            result = self.step()
            if result is not None:
                return result


def solve(data: bytes, level: int, algorithm: str = 'sha256', stop_on_wrap: bool = False) -> SearchResult:
    return SearchEngine(data, level, HashlibDigest(algorithm), stop_on_wrap).run()


def verify(data: bytes, level: int, algorithm: str = 'sha256') -> bool:
    check_threshold(level)
    return count_leading_zero_bits(HashlibDigest(algorithm).digest(data)) >= level
