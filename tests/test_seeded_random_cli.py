import json

import pytest

from seeded_random import RandomSource, _format_numbers, generate_random_numbers, main


def test_format_numbers_text_and_json():
    assert _format_numbers([3, 1, 2], as_json=False) == "3\n1\n2"
    assert _format_numbers([3, 1, 2], as_json=True) == '{"numbers": [3, 1, 2]}'


def test_main_prints_one_number_per_line(capsys):
    main(["--seed", "3", "--count", "4", "--lower", "20", "--upper", "30"])

    lines = capsys.readouterr().out.splitlines()
    assert [int(n) for n in lines] == generate_random_numbers(RandomSource(seed=3), 4, 20, 30)


def test_main_prints_json(capsys):
    main(["--seed", "3", "--count", "4", "--lower", "20", "--upper", "30", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"numbers": generate_random_numbers(RandomSource(seed=3), 4, 20, 30)}


def test_main_unbiased_stays_in_range(capsys):
    main(["--seed", "3", "--count", "50", "--lower", "20", "--upper", "30", "--unbiased", "--json"])

    numbers = json.loads(capsys.readouterr().out)["numbers"]
    assert len(numbers) == 50
    assert all(20 <= n <= 30 for n in numbers)
    assert numbers == generate_random_numbers(RandomSource(seed=3), 50, 20, 30, unbiased=True)


def test_main_rejects_lower_above_upper():
    with pytest.raises(SystemExit) as exc_info:
        main(["--seed", "1", "--lower", "10", "--upper", "9"])

    assert exc_info.value.code == 2


def test_main_requires_seed():
    with pytest.raises(SystemExit):
        main([])
