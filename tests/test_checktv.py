"""Tests for the vector file checker command."""

import pytest

import checktv


class TestCheckTv:
    def test_summary(self, data_dir, capsys):
        checktv.main([str(data_dir / "digest_tests.txt"), str(data_dir / "test_3_tests.txt")])
        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"{data_dir / 'digest_tests.txt'}: 4 test cases, sections: SHA256, SHA1, SHA512_256",
            f"{data_dir / 'test_3_tests.txt'}: 3 test cases",
        ]

    def test_relative_to_source_root(self, data_dir, monkeypatch, capsys):
        monkeypatch.setenv("TESTVECTORS_SRC", str(data_dir))
        checktv.main(["test_1_tests.txt"])
        assert capsys.readouterr().out == f"{data_dir / 'test_1_tests.txt'}: 1 test cases\n"

    def test_syntax_error(self, data_dir, capsys):
        with pytest.raises(SystemExit) as e:
            checktv.main([str(data_dir / "test_1_syntax_error_tests.txt")])
        assert e.value.code == 1
        assert "Expected Key = Value" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as e:
            checktv.main([str(tmp_path / "nope.txt")])
        assert e.value.code == 1
        assert capsys.readouterr().err.startswith("Error: ")
