from monobattlemixer.__main__ import COMMANDS, build_config, create_completer, create_main_parser, main


def _write_roster(tmp_path, count):
    path = tmp_path / "players.txt"
    path.write_text("\n".join(f"P{i}" for i in range(1, count + 1)), encoding="utf-8")
    return path


def test_completer_has_both_command_formats():
    options = create_completer().options

    for cmd in COMMANDS:
        assert cmd in options
        assert f"/{cmd}" in options
    assert "/list" in options


def test_command_line_overrides_config_file(tmp_path):
    config_path = tmp_path / "mixer.json"
    config_path.write_text('{"num_rounds": 5, "seed": 1}', encoding="utf-8")
    args = create_main_parser().parse_args(
        ["mix", "--config", str(config_path), "--seed", "2", "--debug"]
    )

    config = build_config(args)

    assert config.num_rounds == 5
    assert config.seed == 2
    assert config.debug is True


def test_mix_command_writes_report(tmp_path):
    roster = _write_roster(tmp_path, 16)
    output = tmp_path / "teams.txt"

    code = main(
        ["mix", "--players", str(roster), "--output", str(output),
         "--rounds", "2", "--seed", "1"]
    )

    assert code == 0
    assert "--- Round 2 ---" in output.read_text(encoding="utf-8")


def test_mix_command_reports_configuration_errors(tmp_path):
    roster = _write_roster(tmp_path, 10)
    output = tmp_path / "teams.txt"

    code = main(["mix", "--players", str(roster), "--output", str(output)])

    assert code == 1
    assert not output.exists()


def test_validate_command(tmp_path):
    roster = _write_roster(tmp_path, 8)

    assert main(["validate", "--players", str(roster), "--matchups", "1"]) == 0
    assert main(["validate", "--players", str(roster)]) == 1


def test_validate_command_reports_unreadable_roster(tmp_path):
    roster = tmp_path / "players.txt"
    roster.write_bytes(b"P1\n\xffP2\n")

    assert main(["validate", "--players", str(roster)]) == 1
