import re
from typing import Iterator, List

from calculator.error.scanner_error import MalformedNumberError, UnexpectedCharacterError
from calculator.token import Token
from calculator.type import Type
from calculator.util import LINE_BREAK, Span


class Scanner:
    def __init__(self, program: str) -> None:
        self.og_program = program

        # The cursor only ever moves forward
        self.position = 0
        self.line_no = 1
        self.line_start = 0

        self.pattern = re.compile(
            r"""
                (?P<LRB>\()| # Left Round Bracket
                (?P<RRB>\))| # Right Round Bracket
                (?P<PLUS>\+)|
                (?P<MINUS>\-)|
                (?P<STAR>\*)|
                (?P<SLASH>\/)|
                (?P<POWER>\^)|
                (?P<EQ>\=)|
                # Digits and decimal points, validated after matching
                (?P<NUMBER>[0-9][0-9.]*)|
                # Letters only, no digits or underscores
                (?P<ID>[a-zA-Z]+)|
                # Unicode White_Space, which leaves out e.g. the separators \x1c-\x1f
                (?P<SPACE>[\t\n\x0b\x0c\r\x20\x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+)|
                (?P<ERROR>.)
            """,
            flags=re.X,
        )
        # At most one decimal point, which may end the number, e.g. "10."
        self.number_pattern = re.compile(r"[0-9]+(?:\.[0-9]*)?")

    def next_token(self) -> Token:
        """Scan the next token from the program, starting at the cursor.

        Whitespace is skipped. Once the end of the program is reached, every call
        returns an EOF token.

        Raises:
            ScannerException: If the cursor is on a character that starts no token,
                or on a number with a malformed shape such as "1.2.3".

        Returns:
            Token: The next token in the program.
        """
        while self.position < len(self.og_program):
            match = self.pattern.match(self.og_program, self.position)
            span = self.span(match.start(), match.end())
            self.position = match.end()

            match match.lastgroup:
                case "SPACE":
                    self.track_newlines(match)
                    continue
                case "ERROR":
                    UnexpectedCharacterError(self.og_program, span)
                case "NUMBER" if not self.number_pattern.fullmatch(match[0]):
                    MalformedNumberError(self.og_program, span, match[0])

            return Token(match[0], match.lastgroup, span)

        col = self.position - self.line_start
        return Token("", Type.EOF, Span(self.line_no, (col, col)))

    def scan(self) -> List[Token]:
        """Extract the list of tokens from the program passed to `Scanner(program)`,
        up to but excluding the EOF token.

        Returns:
            List[Token]: A list of Token instances
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        token = self.next_token()
        while token.type != Type.EOF:
            yield token
            token = self.next_token()

    def span(self, start: int, end: int) -> Span:
        return Span(self.line_no, (start - self.line_start, end - self.line_start))

    def track_newlines(self, match: re.Match) -> None:
        breaks = list(LINE_BREAK.finditer(match[0]))
        if breaks:
            self.line_no += len(breaks)
            self.line_start = match.start() + breaks[-1].end()
