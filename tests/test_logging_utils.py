import json

from gliders.core.logging_utils import RunLogger


def test_creates_run_directory_and_marker(tmp_path):
    with RunLogger(tmp_path, "demo") as logger:
        logger.write_meta({"seed": 23, "planets": 4})
        logger.log_candidate([0, 1.5, 2.5, True, -3.0, 0, 3.0, 10])
        logger.log_event([0, "best", -3.0, "first"])

    run_dir = tmp_path / "demo"
    assert (tmp_path / "last_run.txt").read_text(encoding="utf-8") == "demo"
    assert json.loads((run_dir / "meta.json").read_text()) == {"planets": 4, "seed": 23}
    rows = (run_dir / "candidates.csv").read_text().splitlines()
    assert rows[1] == "0,1.5,2.5,1,-3,0,3,10"
    assert (run_dir / "events.csv").read_text().splitlines()[1] == "0,best,-3,first"


def test_existing_run_id_gets_suffix(tmp_path):
    with RunLogger(tmp_path, "demo"):
        pass
    with RunLogger(tmp_path, "demo") as second:
        assert second.run_id == "demo_1"


def test_flushes_when_threshold_reached(tmp_path):
    logger = RunLogger(tmp_path, "flush", candidates_flush_threshold=2)
    logger.log_candidate([0, 0.0, 0.0, False, 0.0, 0, 0.0, 1])
    logger.log_candidate([1, 0.0, 0.0, False, 0.0, 0, 0.0, 1])
    assert len(logger.candidates_path.read_text().splitlines()) == 3
    logger.close()
    logger.close()


def test_default_run_id_is_timestamped(tmp_path):
    with RunLogger(tmp_path) as logger:
        assert logger.run_id.endswith("_run")
        assert logger.run_dir.is_dir()
    with RunLogger(tmp_path, logger.run_id) as again:
        assert again.run_id == f"{logger.run_id}_1"
