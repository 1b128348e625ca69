import textwrap

import pytest

from biquadfx import load_equalizer_config
from biquadfx.config import load_toml
from biquadfx.filter import TEN_BAND_FREQUENCIES
from biquadfx.validation import ConfigurationError, OutOfRangeGainError


def write_config(tmp_path, body: str):
    path = tmp_path / "eq.toml"
    path.write_text(textwrap.dedent(body))
    return path


def test_load_toml_roundtrips_table(tmp_path):
    path = write_config(
        tmp_path,
        """
        [equalizer]
        sample_rate = 48000
        """,
    )
    assert load_toml(path) == {"equalizer": {"sample_rate": 48000}}


def test_preset_config(tmp_path):
    path = write_config(
        tmp_path,
        """
        [equalizer]
        sample_rate = 48000
        preset = "ten_band"
        gains = [-10.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 12.0]
        """,
    )
    eq = load_equalizer_config(path)

    assert eq.sample_rate == 48000
    assert eq.bands == TEN_BAND_FREQUENCIES
    assert eq.get_band_gain(0) == -10.0
    assert eq.get_band_gain(9) == 12.0


def test_explicit_bands_config(tmp_path):
    path = write_config(
        tmp_path,
        """
        [equalizer]
        sample_rate = 44100
        bands = [100.0, 1000.0, 10000.0]
        gain_min_db = -12.0
        gain_max_db = 12.0
        q_factor = 1.41
        gains = [3.0, -2.5]
        """,
    )
    eq = load_equalizer_config(path)

    assert eq.bands == (100.0, 1000.0, 10000.0)
    assert (eq.gain_min_db, eq.gain_max_db, eq.q_factor) == (-12.0, 12.0, 1.41)
    assert eq.band_gains == (3.0, -2.5, 0.0)


def test_missing_table(tmp_path):
    path = write_config(
        tmp_path,
        """
        [effects]
        name = "reverb"
        """,
    )
    with pytest.raises(ConfigurationError, match=r"No \[equalizer\] table"):
        load_equalizer_config(path)


def test_invalid_toml(tmp_path):
    path = write_config(tmp_path, "[equalizer\nsample_rate = ")
    with pytest.raises(ConfigurationError, match="Could not parse"):
        load_equalizer_config(path)


def test_gain_out_of_bounds(tmp_path):
    path = write_config(
        tmp_path,
        """
        [equalizer]
        sample_rate = 48000
        preset = "ten_band"
        gains = [-30.0]
        """,
    )
    with pytest.raises(OutOfRangeGainError):
        load_equalizer_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_equalizer_config(tmp_path / "missing.toml")
