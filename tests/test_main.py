"""Tests for the command-line entry point."""

import pytest

from lanbeam import main as main_module
from lanbeam.main import main, parse_args


@pytest.fixture
def wired(monkeypatch, catalog, prompt_with):
    """Run main() against the fixed host, with canned answers and no real server."""
    served = []

    def fake_serve(endpoint) -> bool:
        served.append(endpoint)
        return True

    def install(*answers: str):
        monkeypatch.setattr(main_module, "InterfaceCatalog", lambda: catalog)
        monkeypatch.setattr(main_module, "SelectionPrompt", lambda: prompt_with(*answers))
        monkeypatch.setattr(main_module, "serve", fake_serve)
        return served

    return install


def test_defaults(tmp_path) -> None:
    args = parse_args([str(tmp_path)])

    assert args.path == tmp_path
    assert args.port == 80
    assert args.device is None
    assert args.domain is None
    assert args.verbose == 0
    assert not args.receive


def test_options() -> None:
    args = parse_args(["-r", "-vv", "-n", "wlan0", "-d", "beam.local", "-p", "8080"])

    assert args.receive
    assert args.verbose == 2
    assert args.device == "wlan0"
    assert args.domain == "beam.local"
    assert args.port == 8080


def test_path_required_unless_receiving(capsys) -> None:
    with pytest.raises(SystemExit):
        parse_args([])
    assert "PATH" in capsys.readouterr().err


def test_path_must_exist(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit):
        parse_args([str(tmp_path / "missing")])
    assert "File or path does not exist" in capsys.readouterr().err


@pytest.mark.parametrize("port", ["-1", "65536", "http", "8.0"])
def test_port_must_fit_in_sixteen_bits(port: str, capsys) -> None:
    with pytest.raises(SystemExit):
        parse_args(["-r", "-p", port])
    assert "Must be a integer between 0 and 65536" in capsys.readouterr().err


@pytest.mark.parametrize("port", ["0", "65535"])
def test_port_bounds_are_inclusive(port: str) -> None:
    assert parse_args(["-r", "-p", port]).port == int(port)


def test_main_prints_url_and_qr_then_serves(wired, capsys) -> None:
    served = wired("0\n")

    assert main(["-r", "-n", "eth0", "-p", "8080"]) == 0

    out = capsys.readouterr().out
    assert "Listening on http://10.0.0.2:8080" in out
    assert "\x1b[30;47m" in out
    assert [endpoint.socket_address for endpoint in served] == [("10.0.0.2", 8080)]


def test_main_uses_domain_in_url(wired, capsys) -> None:
    served = wired("2\n", "0\n")

    assert main(["-r", "-d", "beam.local"]) == 0

    assert "Listening on http://beam.local:80" in capsys.readouterr().out
    assert served[0].socket_address == ("192.168.1.5", 80)


def test_main_reports_unknown_interface(wired, capsys) -> None:
    served = wired()

    assert main(["-r", "-n", "doesnotexist"]) == 1

    captured = capsys.readouterr()
    assert "The given network interface doesn't exist: doesnotexist" in captured.err
    assert "Listening on" not in captured.out
    assert served == []


def test_main_reports_bad_choice(wired, capsys) -> None:
    served = wired("5\n")

    assert main(["-r"]) == 1

    assert "Not a valid choice. Must be between 0 and 2" in capsys.readouterr().err
    assert served == []


def test_main_verbose_prints_arguments(wired, capsys) -> None:
    wired("0\n")

    main(["-r", "-v", "-n", "lo"])

    assert "Arguments: Namespace(" in capsys.readouterr().out


def test_main_fails_when_server_cannot_start(wired, monkeypatch) -> None:
    wired("0\n")
    monkeypatch.setattr(main_module, "serve", lambda endpoint: False)

    assert main(["-r", "-n", "eth0", "-p", "8080"]) == 1
