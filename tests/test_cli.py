from datetime import date

from click.testing import CliRunner

from solarday.cli import daylength, elevation, year
from solarday.core.daylight import day_length_hours
from solarday.core.declination import DeclinationModel


def test_daylength_output_line():
  result = CliRunner().invoke(daylength.main, ["--latitude", "51.5", "--date", "2024-06-21"])
  assert result.exit_code == 0
  hours = day_length_hours(51.5, 173, 2024, DeclinationModel.SIMPLE_APPROX)
  assert result.output == f"2024-06-21  |  Latitude: 51.50 deg  |  Daylight: {hours:.2f} hours\n"


def test_daylength_defaults_to_equator_today():
  result = CliRunner().invoke(daylength.main, [])
  assert result.exit_code == 0
  assert result.output.startswith(date.today().isoformat())
  assert "Latitude: 0.00 deg  |  Daylight: 12.00 hours" in result.output


def test_daylength_short_flags_and_model():
  result = CliRunner().invoke(daylength.main, ["-l", "90", "-d", "2023-06-21", "--model", "noaa"])
  assert result.exit_code == 0
  assert "Daylight: 24.00 hours" in result.output


def test_daylength_bad_date_exits_one():
  result = CliRunner().invoke(daylength.main, ["-d", "2024-13-45"])
  assert result.exit_code == 1
  assert "Invalid date format" in result.output


def test_daylength_parse_failures_exit_one():
  runner = CliRunner()
  assert runner.invoke(daylength.main, ["--latitude", "north"]).exit_code == 1
  assert runner.invoke(daylength.main, ["--bogus"]).exit_code == 1
  assert runner.invoke(daylength.main, ["--latitude", "95"]).exit_code == 1


def test_year_table_stdout():
  result = CliRunner().invoke(year.main, ["-l", "0", "-y", "2023"])
  assert result.exit_code == 0
  lines = result.output.splitlines()
  assert lines[0] == "date,day_of_year,daylight_hours"
  assert len(lines) == 366
  assert lines[1].startswith("2023-01-01,1,")


def test_year_table_parquet(tmp_path):
  out = tmp_path / "year.parquet"
  result = CliRunner().invoke(year.main, ["-l", "60", "-y", "2024", "-o", str(out)])
  assert result.exit_code == 0
  assert out.exists()


def test_elevation_readout_from_preset():
  result = CliRunner().invoke(elevation.main, ["--preset", "null_island", "-d", "2024-03-20", "--at", "12:00"])
  assert result.exit_code == 0
  assert result.output.startswith("Time: 12:00\nSolar Elevation: 88.")


def test_elevation_csv_export(tmp_path):
  out = tmp_path / "curve.csv"
  result = CliRunner().invoke(
    elevation.main,
    ["-l", "51.5", "--longitude", "-0.13", "-t", "1", "-d", "2024-06-21", "-o", str(out)],
  )
  assert result.exit_code == 0
  text = out.read_text(encoding="utf-8")
  assert "# Timezone: UTC+1.00" in text


def test_elevation_config_file_overridden_by_flags(tmp_path):
  cfg = tmp_path / "observer.yaml"
  cfg.write_text("observer:\n  latitude: 10\n  date: 2023-09-23\n", encoding="utf-8")
  out = tmp_path / "curve.jsonl"
  result = CliRunner().invoke(elevation.main, ["--config", str(cfg), "-l", "20", "-o", str(out)])
  assert result.exit_code == 0
  first = out.read_text(encoding="utf-8").splitlines()[0]
  assert '"latitude": 20.0' in first and '"date": "2023-09-23"' in first


def test_elevation_errors_exit_one(tmp_path):
  runner = CliRunner()
  assert runner.invoke(elevation.main, ["--at", "25:00"]).exit_code == 1
  assert runner.invoke(elevation.main, ["--preset", "atlantis"]).exit_code == 1
  assert runner.invoke(elevation.main, ["-t", "20"]).exit_code == 1
  bad = tmp_path / "bad.yaml"
  bad.write_text("latitude: 200\n", encoding="utf-8")
  assert runner.invoke(elevation.main, ["--config", str(bad)]).exit_code == 1
  assert runner.invoke(elevation.main, ["-o", str(tmp_path / "x.xlsx")]).exit_code == 1


def test_elevation_malformed_config_exits_one(tmp_path):
  runner = CliRunner()
  as_list = tmp_path / "list.yaml"
  as_list.write_text("- 1\n- 2\n", encoding="utf-8")
  broken = tmp_path / "broken.yaml"
  broken.write_text("latitude: [\n", encoding="utf-8")
  for cfg in (as_list, broken):
    result = runner.invoke(elevation.main, ["--config", str(cfg)])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def test_elevation_readout_matches_every_minute_label():
  result = CliRunner().invoke(elevation.main, ["-l", "51.5", "-d", "2024-06-21", "--at", "07:07"])
  assert result.exit_code == 0
  assert result.output.startswith("Time: 07:07\n")


def test_daylength_uses_preset_and_config(tmp_path):
  runner = CliRunner()
  result = runner.invoke(daylength.main, ["--preset", "north_pole", "-d", "2023-06-21"])
  assert result.exit_code == 0
  assert "Latitude: 90.00 deg  |  Daylight: 24.00 hours" in result.output
  cfg = tmp_path / "observer.yaml"
  cfg.write_text("latitude: 51.5\ndate: 2024-06-21\nmodel: noaa\n", encoding="utf-8")
  result = runner.invoke(daylength.main, ["--config", str(cfg)])
  assert result.exit_code == 0
  hours = day_length_hours(51.5, 173, 2024, DeclinationModel.NOAA_FOURIER)
  assert result.output == f"2024-06-21  |  Latitude: 51.50 deg  |  Daylight: {hours:.2f} hours\n"
  # flags still win over the file
  result = runner.invoke(daylength.main, ["--config", str(cfg), "-l", "0", "--model", "simple"])
  assert "Latitude: 0.00 deg  |  Daylight: 12.00 hours" in result.output


def test_daylength_malformed_config_exits_one(tmp_path):
  cfg = tmp_path / "list.yaml"
  cfg.write_text("- 1\n- 2\n", encoding="utf-8")
  result = CliRunner().invoke(daylength.main, ["--config", str(cfg)])
  assert result.exit_code == 1
  assert "Error:" in result.output


def test_year_uses_config_model_and_year(tmp_path):
  cfg = tmp_path / "observer.yaml"
  cfg.write_text("latitude: 60\ndate: 2024-01-01\nmodel: noaa\n", encoding="utf-8")
  result = CliRunner().invoke(year.main, ["--config", str(cfg)])
  assert result.exit_code == 0
  lines = result.output.splitlines()
  assert len(lines) == 367
  expected = day_length_hours(60.0, 1, 2024, DeclinationModel.NOAA_FOURIER)
  assert lines[1] == f"2024-01-01,1,{round(expected, 4)}"


def test_year_out_of_range_exits_one():
  runner = CliRunner()
  for value in ("0", "10000"):
    result = runner.invoke(year.main, ["-y", value])
    assert result.exit_code == 1
    assert "Error" in result.output
