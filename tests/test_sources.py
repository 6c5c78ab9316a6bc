import io
import sys
import tokenize
import unittest
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC))

FSTRING_START = getattr(tokenize, "FSTRING_START", None)
FSTRING_END = getattr(tokenize, "FSTRING_END", None)


def _quote(token_text: str) -> str:
    body = token_text.lstrip("rRbBuUfF")
    return body[:3] if body[:3] in ('"""', "'''") else body[:1]


def _reused_fstring_quotes(text: str):
    """Yield (line, token) for strings nested in an f-string that reuse its quote."""
    outer = []
    for tok in tokenize.generate_tokens(io.StringIO(text).readline):
        if tok.type in (tokenize.STRING, FSTRING_START) and outer:
            if _quote(tok.string).startswith(outer[-1]):
                yield tok.start[0], tok.string
        if tok.type == FSTRING_START:
            outer.append(_quote(tok.string))
        elif tok.type == FSTRING_END:
            outer.pop()


class TestSourceCompat(unittest.TestCase):
    def test_package_imports(self):
        import nbdoc  # noqa: F401
        from nbdoc import cli, config, fmt, io as nbio, lint  # noqa: F401

    @unittest.skipIf(FSTRING_START is None, "f-strings are single tokens before Python 3.12")
    def test_fstrings_do_not_reuse_outer_quote(self):
        # requires-python is >=3.9; same-quote nesting only parses on 3.12+
        for path in sorted((SRC / "nbdoc").glob("*.py")):
            with self.subTest(path=path.name):
                found = list(_reused_fstring_quotes(path.read_text(encoding="utf-8")))
                self.assertEqual(found, [])

    def test_detects_reused_quote(self):
        if FSTRING_START is None:
            self.skipTest("f-strings are single tokens before Python 3.12")
        bad = 'x = f"{getattr(e, "message", e)}"\n'
        good = "x = f\"{getattr(e, 'message', e)}\"\n"
        self.assertEqual(len(list(_reused_fstring_quotes(bad))), 1)
        self.assertEqual(list(_reused_fstring_quotes(good)), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
