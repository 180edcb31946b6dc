"""Tests for the baseint command-line interface."""

import io

import pytest

from baseint.api.cli import create_parser, main

from conftest import EXAMPLE_ENCODED, EXAMPLE_UUID


@pytest.fixture(autouse=True)
def default_charset(monkeypatch):
    monkeypatch.delenv("BASEINT_CHARSET", raising=False)


class TestCommands:
    """Run each subcommand through main()."""

    def test_encode(self, capsys):
        assert main(["encode", "65535"]) == 0
        assert capsys.readouterr().out == "RDB\n"

    def test_encode_many(self, capsys):
        assert main(["encode", "0", "1", "62"]) == 0
        assert capsys.readouterr().out == "A\nB\nBA\n"

    def test_decode(self, capsys):
        assert main(["decode", EXAMPLE_ENCODED]) == 0
        assert capsys.readouterr().out == "246822080025974834485881087518675471512\n"

    def test_encode_uuid(self, capsys):
        assert main(["encode-uuid", EXAMPLE_UUID]) == 0
        assert capsys.readouterr().out == EXAMPLE_ENCODED + "\n"

    def test_decode_uuid(self, capsys):
        assert main(["decode-uuid", "RDB"]) == 0
        assert capsys.readouterr().out == "00000000-0000-0000-0000-ffff\n"

    def test_decode_uuid_canonical(self, capsys):
        assert main(["decode-uuid", "--canonical", "RDB"]) == 0
        assert capsys.readouterr().out == "00000000-0000-0000-0000-00000000ffff\n"

    def test_hex(self, capsys):
        assert main(["hex", "255", "256"]) == 0
        assert capsys.readouterr().out == "ff\n0100\n"

    def test_alphabets(self, capsys):
        assert main(["alphabets"]) == 0
        out = capsys.readouterr().out
        assert "base62" in out
        assert "base32z" in out
        assert len(out.splitlines()) == 10


class TestCharsetSelection:
    """Test --alphabet, --charset and the environment default."""

    def test_alphabet(self, capsys):
        assert main(["--alphabet", "base36", "encode", "1234567890"]) == 0
        assert capsys.readouterr().out == "kf12oi\n"

    def test_charset(self, capsys):
        assert main(["--charset", "01", "encode", "5"]) == 0
        assert capsys.readouterr().out == "101\n"

    def test_alphabet_and_charset_exclusive(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["-a", "base2", "-c", "01", "encode", "1"])

    def test_default_from_environment(self, monkeypatch, capsys):
        """The parser default follows BASEINT_CHARSET."""
        monkeypatch.setenv("BASEINT_CHARSET", "base2")
        assert main(["encode", "5"]) == 0
        assert capsys.readouterr().out == "101\n"


class TestInputAndErrors:
    """Test stdin input and error reporting."""

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n3\n"))
        assert main(["encode", "-"]) == 0
        assert capsys.readouterr().out == "B\nC\nD\n"

    def test_invalid_character(self, capsys):
        assert main(["decode", "AB!"]) == 1
        assert "ERROR: Invalid character '!'" in capsys.readouterr().err

    def test_negative(self, capsys):
        assert main(["encode", "-5"]) == 1
        assert "negative" in capsys.readouterr().err

    def test_unknown_alphabet(self, capsys):
        assert main(["--alphabet", "base99", "encode", "1"]) == 1
        assert "Unknown alphabet" in capsys.readouterr().err

    def test_bad_charset(self, capsys):
        assert main(["--charset", "aa", "encode", "1"]) == 1
        assert "Duplicate character" in capsys.readouterr().err

    def test_uuid_overflow(self, capsys):
        too_big = str(2**128)
        assert main(["encode", too_big]) == 0
        encoded = capsys.readouterr().out.strip()
        assert main(["decode-uuid", encoded]) == 1
        assert "too large" in capsys.readouterr().err

    def test_missing_command(self):
        with pytest.raises(SystemExit):
            main([])


class TestLargeValues:
    """Values past the interpreter's decimal conversion limit."""

    def test_encode_decode_5000_digits(self, capsys):
        numstr = "9" * 5000
        assert main(["encode", numstr]) == 0
        encoded = capsys.readouterr().out.strip()
        assert main(["decode", encoded]) == 0
        assert capsys.readouterr().out.strip() == numstr
