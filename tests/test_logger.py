from pathlib import Path

from autofocus.output.logger import SimpleLogger, printable


def test_log_file_gets_session_header(tmp_path: Path):
    log_file = tmp_path / "nested" / "run.log"
    SimpleLogger(log_file)
    text = log_file.read_text()
    assert "Session started:" in text
    assert "=" * 60 in text


def test_levels_go_to_console_and_file(tmp_path: Path, capsys):
    log_file = tmp_path / "run.log"
    logger = SimpleLogger(log_file)
    logger.info("analysing frames")
    logger.warning("slow disk")
    logger.success("done")
    logger.error("broken [frame00001].png")

    captured = capsys.readouterr()
    assert "[INFO] analysing frames" in captured.out
    assert "[WARNING] slow disk" in captured.out
    assert "[SUCCESS] done" in captured.out
    # brackets in messages are printed verbatim, and errors go to stderr
    assert "[ERROR] broken [frame00001].png" in captured.err
    assert "broken" not in captured.out

    text = log_file.read_text()
    for expected in ("[INFO] analysing frames", "[WARNING] slow disk", "[SUCCESS] done", "[ERROR] broken"):
        assert expected in text


def test_table_and_section(tmp_path: Path, capsys):
    log_file = tmp_path / "run.log"
    logger = SimpleLogger(log_file)
    logger.section("Summary")
    logger.table(["#", "Frame"], [["1", "42"]])
    logger.table(["#", "Frame"], [])

    out = capsys.readouterr().out
    assert "Summary" in out
    assert "Frame" in out
    assert "42" in out

    lines = log_file.read_text().splitlines()
    assert "#\tFrame" in lines
    assert "1\t42" in lines


def test_progress(capsys):
    logger = SimpleLogger()
    logger.progress(1, 4, "frames analysed")
    logger.progress(0, 0)
    out = capsys.readouterr().out
    assert "[1/4] (25.0%) frames analysed" in out
    assert "[0/0] (0.0%)" in out


def test_undecodable_names_are_escaped(tmp_path: Path, capsys):
    name = "f\udcff00002.png"
    assert printable(name) == "f\\udcff00002.png"
    assert printable("frame00001.png") == "frame00001.png"

    log_file = tmp_path / "run.log"
    logger = SimpleLogger(log_file)
    logger.error(f"error while opening image '{name}'")
    logger.table(["File"], [[name]])

    assert "f\\udcff00002.png" in capsys.readouterr().err
    assert "f\\udcff00002.png" in log_file.read_text()
