"""
Implements a greedy line-break algorithm with full (left-right) justification
    for rigid text i.e. text where every character (including spaces) is
    assumed to be exactly 1 unit wide.

There are 2 main parts to the algorithm:
    Part 1: Packing. The words of the text are put onto lines from left to
        right. A word goes on the last line if it fits there, otherwise it
        starts a new line. Lines are never revisited once a later line has
        been started.

    Part 2: Rendering. Every line is padded out to exactly the line width.
        Lines with more than one word have their padding spread over the gaps
        between the words, with any leftover spaces going to the leftmost
        gaps. A line with a single word is left justified and padded on the
        right.

Words longer than the line width are never broken; the whole text is
    rejected with a WordTooLong error instead.
"""
from io import StringIO
from typing import Final, Iterator, List, Literal, Optional, Sequence
import argparse
import fileinput
import logging
import sys

from logging_config import setup_logging
from tools import profile

logger = logging.getLogger(__name__)

DEFAULT_WIDTH:Final[int] = 80
SPACE:Final[Literal[' ']] = ' '
LINE_END:Final[Literal['\n']] = '\n'

# =============================================================================
# Errors
# -----------------------------------------------------------------------------

class WordTooLong(Exception):
    """
    Raised when a word of the text is longer than the line width and so could
        not fit on any line, even by itself.
    """
    def __init__(self, word:str, line_width:int):
        super().__init__(f'word exceeds line width: "{word}" is {len(word)} characters long but the line width is {line_width}')
        self.word = word
        self.line_width = line_width


def check_width(line_width:int) -> int:
    """
    Returns the given line width if it is usable, otherwise raises a
        ValueError. A usable width is an int of at least 1.
    """
    if isinstance(line_width, bool) or not isinstance(line_width, int):
        raise ValueError(f'Unable To Break Text: The width must be an int, not {type(line_width).__name__}.')
    if line_width < 1:
        raise ValueError(f'Unable To Break Text: The width must be at least 1, not {line_width}.')
    return line_width

# =============================================================================
# Line
# -----------------------------------------------------------------------------

class Line:
    """
    One line of the paragraph: the words put on it (in order) and how many
        characters those words take up, not counting the spaces between them.
    """
    __slots__ = ['words', 'char_counter']

    def __init__(self, words:Optional[List[str]]=None):
        self.words:List[str] = [] if words is None else list(words)
        self.char_counter:int = sum(len(word) for word in self.words)

    @classmethod
    def new_with_word(cls, word:str) -> 'Line':
        return cls([word])

    def add_word(self, word:str):
        self.char_counter += len(word)
        self.words.append(word)

    def word_fits(self, word:str, line_width:int) -> bool:
        """
        Whether the given word can be added to the end of this line.

        NOTE: one space is reserved for every word already on the line, which
            is the number of gaps the line will have once the new word is
            added to it.
        """
        return self.char_count() + self.word_count() + len(word) <= line_width

    def char_count(self) -> int:
        return self.char_counter

    def word_count(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self):
        return len(self.words)

    def render(self, line_width:int, space_char:str=SPACE) -> str:
        """
        Returns this line padded out to exactly `line_width` characters.

        With more than one word, the padding goes between the words: every gap
            gets the same base number of spaces and the remainder is handed
            out one space at a time to the gaps from left to right. A single
            word is left justified with all the padding after it.
        """
        text = StringIO()
        whitespace_count = line_width - self.char_count()

        if self.word_count() > 1:
            gap_count = self.word_count() - 1
            base_width, extra = divmod(whitespace_count, gap_count)

            for i, word in enumerate(self.words):
                text.write(word)
                if i < gap_count:
                    text.write(space_char * (base_width + 1 if i < extra else base_width))
        else:
            for word in self.words:
                text.write(word)
            text.write(space_char * whitespace_count)

        return text.getvalue()

    def __repr__(self):
        return f'<{self.__class__.__name__}(words={self.words}, char_counter={self.char_counter})>'

# =============================================================================
# Document
# -----------------------------------------------------------------------------

class Document:
    """
    A paragraph that has been broken up into lines of at most `line_width`
        characters (with 1 space between the words of each line).
    """
    __slots__ = ['lines', 'line_width']

    def __init__(self, line_width:int):
        self.lines:List[Line] = []
        self.line_width:int = check_width(line_width)

    def add_word(self, word:str):
        """
        Adds the word to the last line if it fits there, otherwise starts a
            new line with it.

        Raises WordTooLong if the word is longer than the line width.
        """
        if len(word) > self.line_width:
            raise WordTooLong(word, self.line_width)

        if len(self.lines) == 0 or not self.lines[-1].word_fits(word, self.line_width):
            self.lines.append(Line.new_with_word(word))
        else:
            self.lines[-1].add_word(word)

    @classmethod
    def from_words(cls, words:Sequence[str], line_width:int) -> 'Document':
        """
        Packs the given words, in order, into a new Document.

        Raises WordTooLong on the first word that is longer than the line
            width. Nothing is packed after that word.
        """
        doc = cls(line_width)
        for word in words:
            doc.add_word(word)
        return doc

    @classmethod
    def from_str(cls, text:str, line_width:int) -> 'Document':
        """
        Splits the text on runs of whitespace and packs the resulting words
            into a new Document.
        """
        doc = cls.from_words(text.split(), line_width)
        logger.debug(f'Packed {doc.word_count()} words into {len(doc)} lines of width {line_width}')
        return doc

    def word_count(self) -> int:
        return sum(line.word_count() for line in self.lines)

    def capacity_hint(self) -> int:
        """
        Roughly how many characters the formatted document will need. Room is
            left for 2 units per character plus the line ends between lines.
        """
        if len(self.lines) == 0:
            return 0
        return len(self.lines) * self.line_width * 2 + len(self.lines) - 1

    def format_to_string(self, space_char:str=SPACE, line_end:str=LINE_END) -> str:
        """
        Returns the document fully justified: every line exactly
            `line_width` characters long, lines seperated by `line_end` and
            no `line_end` after the last line.
        """
        text = StringIO()
        for i, line in enumerate(self.lines):
            if i > 0:
                text.write(line_end)
            text.write(line.render(self.line_width, space_char))
        return text.getvalue()

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self):
        return len(self.lines)

    def __repr__(self):
        return f'<{self.__class__.__name__}(line_width={self.line_width}, lines={len(self.lines)})>'

# =============================================================================
# Entry Points
# -----------------------------------------------------------------------------

def build(text:str, line_width:int) -> Document:
    return Document.from_str(text, line_width)


def render(document:Document) -> str:
    return document.format_to_string()


@profile()
def transform(text:str, line_width:int) -> str:
    """
    Greedy-breaks the given text into lines of `line_width` characters and
        returns it fully justified.

    Raises WordTooLong if any word is longer than `line_width` and
        ValueError if `line_width` is not an int of at least 1.
    """
    return render(build(text, line_width))

# =============================================================================
# Main
# -----------------------------------------------------------------------------

def parse_args(argv:Optional[List[str]]=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='greedy-justify',
        description='Greedily break text into lines and fully justify them.',
    )
    parser.add_argument(
        '-w', '--width',
        type=int,
        default=DEFAULT_WIDTH,
        help=f'Width of every output line (default: {DEFAULT_WIDTH}).'
    )
    parser.add_argument(
        'files',
        nargs='*',
        help='Files to read the text from. Reads from stdin if none are given.'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages.')
    parser.add_argument('--log-file', default=None, help='Also write the log to this file.')
    return parser.parse_args(argv)


def main(argv:Optional[List[str]]=None) -> int:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        with fileinput.input(files=args.files or ('-',), openhook=fileinput.hook_encoded('utf-8')) as lines:
            try:
                text = ''.join(lines)
            except UnicodeDecodeError as e:
                print(f'greedy-justify: failed to decode \'{lines.filename()}\': {e}', file=sys.stderr)
                return 1
    except OSError as e:
        print(f'greedy-justify: failed to open \'{e.filename}\': {e.strerror}', file=sys.stderr)
        return 1

    try:
        out = transform(text, args.width)
    except WordTooLong as e:
        logger.debug(f'Rejected input: {e}')
        print(f'greedy-justify: {e}', file=sys.stderr)
        return 1
    except ValueError as e:
        print(f'greedy-justify: {e}', file=sys.stderr)
        return 1

    if out:
        print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
