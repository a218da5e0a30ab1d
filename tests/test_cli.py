"""
CLI tests for hex0cc.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
import pytest
import hex0cc


class TestCli:
    def test_file_to_file(self, tmp_path):
        src = tmp_path / "in.hex0"
        dst = tmp_path / "out.bin"
        src.write_text("# header\n7f 45 4c 46\n")
        assert hex0cc.main([str(src), str(dst)]) == 0
        assert dst.read_bytes() == b"\x7fELF"

    def test_stdin_to_stdout(self, monkeypatch, capsysbinary):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"41 42 43\n")))
        assert hex0cc.main([]) == 0
        assert capsysbinary.readouterr().out == b"ABC"

    def test_dash_means_stdout(self, tmp_path, capsysbinary):
        src = tmp_path / "in.hex0"
        src.write_bytes(b"30 31")
        assert hex0cc.main([str(src), "-"]) == 0
        assert capsysbinary.readouterr().out == b"01"

    def test_truncated_exit_code(self, tmp_path, capsys):
        src = tmp_path / "in.hex0"
        dst = tmp_path / "out.bin"
        src.write_bytes(b"AABBC")
        assert hex0cc.main([str(src), str(dst)]) == 1
        assert "ERROR" in capsys.readouterr().err
        assert dst.read_bytes() == b"\xaa\xbb"

    def test_missing_input(self, tmp_path, capsys):
        assert hex0cc.main([str(tmp_path / "missing.hex0")]) == 1
        assert "failed to open input" in capsys.readouterr().err

    def test_lenient_eof_flag(self, tmp_path):
        src = tmp_path / "in.hex0"
        dst = tmp_path / "out.bin"
        src.write_bytes(b"AA ; no newline")
        assert hex0cc.main([str(src), str(dst)]) == 1
        assert hex0cc.main(["--lenient-eof", str(src), str(dst)]) == 0
        assert dst.read_bytes() == b"\xaa"

    def test_encode(self, tmp_path):
        src = tmp_path / "in.bin"
        dst = tmp_path / "out.hex0"
        src.write_bytes(b"\x01\x02\x03")
        assert hex0cc.main(["--encode", "--per-line", "2", str(src), str(dst)]) == 0
        assert dst.read_text() == "01 02\n03\n"

    def test_log_file(self, tmp_path):
        src = tmp_path / "in.hex0"
        log_file = tmp_path / "logs" / "hex0.log"
        src.write_bytes(b"00 11")
        assert hex0cc.main([str(src), str(tmp_path / "o.bin"),
                            "--log-file", str(log_file)]) == 0
        assert "Wrote 2 bytes" in log_file.read_text(encoding="utf-8")

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            hex0cc.main(["--version"])
        assert exc.value.code == 0
        assert "hex0cc" in capsys.readouterr().out

    def test_negative_per_line_rejected(self, tmp_path, capsys):
        src = tmp_path / "in.bin"
        src.write_bytes(b"\x01")
        with pytest.raises(SystemExit) as exc:
            hex0cc.main(["--encode", "--per-line", "-1", str(src)])
        assert exc.value.code == 2
        err = capsys.readouterr().err
        assert "--per-line" in err
        assert "must be >= 0" in err
        assert "Internal error" not in err
