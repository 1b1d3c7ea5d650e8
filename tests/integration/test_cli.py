"""End-to-end coverage for the ``arbgen`` command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from arbgen.cli import main


@pytest.fixture()
def outputs(tmp_path: Path) -> tuple[Path, Path]:
    return tmp_path / "lib" / "generated" / "l10n.g.dart", tmp_path / "web" / "l10n.ts"


def _args(arb_dir: Path, outputs: tuple[Path, Path], *extra: str) -> list[str]:
    dart_out, ts_out = outputs
    return ["-a", str(arb_dir), "-d", str(dart_out), "-t", str(ts_out), *extra]


def test_main_writes_both_outputs(write_bundle, arb_dir: Path, outputs, capsys) -> None:
    write_bundle("app_en.arb", {"@@locale": "en", "greet": "Hello {name}"})
    write_bundle("app_de.arb", {"greet": "Hallo {name}"})

    exit_code = main(_args(arb_dir, outputs))

    dart_out, ts_out = outputs
    assert exit_code == 0
    assert "String greet({required Object? name})" in dart_out.read_text(encoding="utf-8")
    assert "greet({ name }: { 'name': unknown }): string {" in ts_out.read_text(encoding="utf-8")
    assert "[ok] 1 key(s), locales: de, en" in capsys.readouterr().out


def test_main_rejects_unknown_parameters_before_io(arb_dir: Path, outputs, capsys) -> None:
    exit_code = main(_args(arb_dir, outputs, "--js-out", "out.js"))

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "usage: arbgen" in captured.out
    assert "Unknown parameter: --js-out" in captured.err
    assert not any(path.exists() for path in outputs)


def test_main_fails_without_writing_on_missing_translation(
    write_bundle, arb_dir: Path, outputs, capsys
) -> None:
    write_bundle("app_en.arb", {"greet": "Hello"})
    write_bundle("app_de.arb", {})

    exit_code = main(_args(arb_dir, outputs))

    assert exit_code == 1
    assert 'Missing "de" translation for key: greet' in capsys.readouterr().err
    assert not any(path.exists() for path in outputs)


def test_main_keeps_existing_outputs_on_failure(write_bundle, arb_dir: Path, outputs) -> None:
    dart_out, ts_out = outputs
    dart_out.parent.mkdir(parents=True)
    dart_out.write_text("previous", encoding="utf-8")
    write_bundle("strings.arb", {"greet": "Hello"})

    assert main(_args(arb_dir, outputs)) == 1
    assert dart_out.read_text(encoding="utf-8") == "previous"
    assert not ts_out.exists()


def test_main_applies_fallback_language(write_bundle, arb_dir: Path, outputs) -> None:
    write_bundle("app_en.arb", {"greet": "Hello"})
    write_bundle("app_de.arb", {})

    assert main(_args(arb_dir, outputs, "-f", "en")) == 0

    dart = outputs[0].read_text(encoding="utf-8")
    assert "  'greet': {\n    'de': 'Hello',\n    'en': 'Hello',\n  }," in dart


def test_main_check_reports_stale_outputs(write_bundle, arb_dir: Path, outputs, capsys) -> None:
    write_bundle("app_en.arb", {"greet": "Hello"})

    assert main(_args(arb_dir, outputs, "--check")) == 1
    assert not any(path.exists() for path in outputs)
    assert "[stale]" in capsys.readouterr().out

    assert main(_args(arb_dir, outputs)) == 0
    assert main(_args(arb_dir, outputs, "--check")) == 0

    write_bundle("app_en.arb", {"greet": "Hello again"})
    assert main(_args(arb_dir, outputs, "--check")) == 1


def test_main_reports_undecodable_bundle(arb_dir: Path, outputs, capsys) -> None:
    (arb_dir / "app_en.arb").write_bytes(b'{"greet": "\xff"}')

    assert main(_args(arb_dir, outputs)) == 1
    assert not any(path.exists() for path in outputs)
    assert "app_en.arb" in capsys.readouterr().err


def test_main_check_treats_undecodable_output_as_stale(
    write_bundle, arb_dir: Path, outputs, capsys
) -> None:
    write_bundle("app_en.arb", {"greet": "Hello"})
    assert main(_args(arb_dir, outputs)) == 0
    capsys.readouterr()

    dart_out, _ = outputs
    dart_out.write_bytes(b"\xff")

    assert main(_args(arb_dir, outputs, "--check")) == 1
    assert "[stale]" in capsys.readouterr().out


def test_main_reads_yaml_configuration(write_bundle, arb_dir: Path, tmp_path: Path) -> None:
    write_bundle("app_en.arb", {"greet": "Hello"})
    write_bundle("app_fi.arb", {})
    config_file = tmp_path / "l10n.yaml"
    config_file.write_text(
        "\n".join(
            [
                f"arb_dir: {arb_dir.as_posix()}",
                f"dart_out: {(tmp_path / 'out' / 'l10n.dart').as_posix()}",
                f"ts_out: {(tmp_path / 'out' / 'l10n.ts').as_posix()}",
                "fallback_locale: en",
                "default_locale: fi",
            ]
        ),
        encoding="utf-8",
    )

    assert main(["--config", str(config_file)]) == 0
    assert "const defaultLocale = 'fi';" in (tmp_path / "out" / "l10n.dart").read_text(
        encoding="utf-8"
    )


def test_main_rejects_unknown_yaml_keys(tmp_path: Path, capsys) -> None:
    config_file = tmp_path / "l10n.yaml"
    config_file.write_text("template-arb-file: app_en.arb\n", encoding="utf-8")

    assert main(["-c", str(config_file)]) == 1
    assert "Unknown parameter: template-arb-file" in capsys.readouterr().err


def test_main_reports_locale_inference_failure(write_bundle, arb_dir: Path, outputs, capsys) -> None:
    write_bundle("messages.arb", {"greet": "Hello"})

    assert main(_args(arb_dir, outputs)) == 1
    assert "Cannot infer locale from: messages.arb" in capsys.readouterr().err


def test_main_prints_version(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("arbgen ")
