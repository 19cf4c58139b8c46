import json

import pytest

from scripts.seed_demo import SETTINGS_KEY, build_settings, main


class RecordingRedis:
    def __init__(self):
        self.data = {}

    def set(self, key, value):
        self.data[key] = value


def test_main_stores_settings():
    client = RecordingRedis()

    main(["--low", "1", "--high", "6", "--count", "3"], client=client)

    assert json.loads(client.data[SETTINGS_KEY]) == {"low": 1, "high": 6, "count": 3}


def test_build_settings_rejects_invalid_range():
    with pytest.raises(ValueError):
        build_settings(5, 4, 1)


def test_main_rejects_invalid_range():
    with pytest.raises(SystemExit):
        main(["--low", "5", "--high", "4"], client=RecordingRedis())
