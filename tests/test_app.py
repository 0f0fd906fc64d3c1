import io

import app


def test_demo_output():
    out = io.StringIO()
    assert app.main([], out=out) == 0
    assert out.getvalue().splitlines() == [
        "Starting the engine of the car with a key.",
        "Driving a car with 4 wheels",
        "Starting the engine of the motorcycle with a kick.",
        "Driving a motorcycle with 2 wheels",
        "Bicycles don't have engines. Just pedal.",
        "Driving a bicycle with 2 wheels",
    ]


def test_demo_defaults_to_stdout(capsys):
    app.run_demo()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert lines[0] == "Starting the engine of the car with a key."


def test_play_flag_runs_playground(monkeypatch):
    calls = []
    monkeypatch.setattr(app, 'play', lambda: calls.append('play'))
    out = io.StringIO()
    assert app.main(['--play'], out=out) == 0
    assert calls == ['play']
    assert out.getvalue() == ""
