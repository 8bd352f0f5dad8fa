"""Tests for the keyring-core command line tool."""

import io

import pytest

from keyring_core.cli import EXIT_INVALID, EXIT_NOT_IMPLEMENTED, EXIT_OK, logger, main
from keyring_core.crypto import digest_hex, generate_keypair, sign


class TestCli:
    def test_keygen_hides_secret(self, capsys) -> None:
        assert main(["keygen"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Node ID:" in out
        assert "Public key:" in out
        assert "Secret key:" not in out

    def test_keygen_show_secret(self, capsys) -> None:
        assert main(["keygen", "--show-secret"]) == EXIT_OK
        assert "Secret key:" in capsys.readouterr().out

    def test_hash_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "blob.bin"
        path.write_bytes(b"abc")
        assert main(["hash", str(path)]) == EXIT_OK
        assert capsys.readouterr().out.strip() == digest_hex(b"abc")

    def test_verify_valid(self, tmp_path, capsys) -> None:
        keypair = generate_keypair()
        path = tmp_path / "msg.txt"
        path.write_bytes(b"signed message")
        signature = sign(b"signed message", keypair.secret)
        code = main(["verify", str(path), "-s", signature.hex(), "-p", keypair.public.hex()])
        assert code == EXIT_OK
        assert capsys.readouterr().out.strip() == "valid"

    def test_verify_invalid(self, tmp_path, capsys) -> None:
        keypair = generate_keypair()
        path = tmp_path / "msg.txt"
        path.write_bytes(b"tampered message")
        signature = sign(b"signed message", keypair.secret)
        code = main(["verify", str(path), "-s", signature.hex(), "-p", keypair.public.hex()])
        assert code == EXIT_INVALID
        assert capsys.readouterr().out.strip() == "invalid"

    def test_verify_bad_hex(self, tmp_path, capsys) -> None:
        path = tmp_path / "msg.txt"
        path.write_bytes(b"x")
        assert main(["verify", str(path), "-s", "zz", "-p", "zz"]) == EXIT_INVALID
        assert capsys.readouterr().out.strip() == "invalid"

    def test_store_put_not_implemented(self, tmp_path, capsys) -> None:
        path = tmp_path / "blob.bin"
        path.write_bytes(b"abc")
        assert main(["store", "put", str(path)]) == EXIT_NOT_IMPLEMENTED
        assert "not implemented" in capsys.readouterr().err

    def test_store_get_not_implemented(self, capsys) -> None:
        assert main(["store", "get", "00" * 32]) == EXIT_NOT_IMPLEMENTED

    def test_bad_config_file(self, tmp_path, capsys) -> None:
        config_file = tmp_path / "keyring.json"
        config_file.write_text("{")
        assert main(["--config", str(config_file), "keygen"]) == EXIT_INVALID
        assert "cannot load config" in capsys.readouterr().err

    def test_missing_command(self) -> None:
        with pytest.raises(SystemExit):
            main([])

    def test_hash_missing_file(self, tmp_path, capsys) -> None:
        assert main(["hash", str(tmp_path / "missing.bin")]) == EXIT_INVALID
        assert capsys.readouterr().err.startswith("Error:")

    def test_verify_missing_file(self, tmp_path, capsys) -> None:
        keypair = generate_keypair()
        signature = sign(b"x", keypair.secret)
        code = main(
            ["verify", str(tmp_path / "missing.txt"), "-s", signature.hex(), "-p", keypair.public.hex()]
        )
        assert code == EXIT_INVALID
        assert capsys.readouterr().err.startswith("Error:")

    def test_bad_log_level_in_config(self, tmp_path, capsys) -> None:
        config_file = tmp_path / "keyring.json"
        config_file.write_text('{"log_level": "loud"}')
        assert main(["--config", str(config_file), "keygen"]) == EXIT_INVALID
        assert "cannot load config" in capsys.readouterr().err

    @pytest.mark.parametrize("blob_hash", ["not-hex", "abcd"])
    def test_store_get_bad_hash(self, blob_hash, capsys) -> None:
        assert main(["store", "get", blob_hash]) == EXIT_INVALID
        assert "invalid blob hash" in capsys.readouterr().err

    def test_hash_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"abc")))
        assert main(["hash", "-"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == digest_hex(b"abc")

    def test_verify_stdin(self, monkeypatch, capsys) -> None:
        keypair = generate_keypair()
        signature = sign(b"piped message", keypair.secret)
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"piped message")))
        code = main(["verify", "-", "-s", signature.hex(), "-p", keypair.public.hex()])
        assert code == EXIT_OK
        assert capsys.readouterr().out.strip() == "valid"

    def test_logger_named_after_module(self) -> None:
        assert logger.name == "keyring_core.cli"
