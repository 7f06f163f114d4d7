import json

from apps.cli.run import main


def test_auto_mode_writes_reports(tmp_path, capsys):
    rc = main(["auto", "--sample", "4", "--progress", "off", "--outdir", str(tmp_path)])
    assert rc == 0

    out = capsys.readouterr().out
    assert "Performing 4 iterations" in out and "Average solve length" in out

    manifests = list(tmp_path.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["summary"]["solved"] == 4
    assert len(list(tmp_path.glob("run_*.csv"))) == 1


def test_invalid_config_exit_code(capsys):
    assert main(["auto", "--length", "7"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_interactive_mode(monkeypatch, capsys):
    # Answer each printed guess honestly for secret BGOY.
    from codebreaker.engine import render_score, score
    printed = []

    def fake_input(prompt):
        guess = printed[-1]
        return render_score(score("BGOY", guess))

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setattr("builtins.print", lambda *a, **k: printed.append(" ".join(map(str, a))))
    assert main([]) == 0
    assert printed[-1].startswith("The answer is: BGOY")
