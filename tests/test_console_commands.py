import pytest

from sardips.console_commands import (
    CommandKind,
    DevConsoleCommand,
    UnknownCommandError,
    command_names,
    common_prefix,
    complete_command,
    parse_command,
)


def test_command_names_in_order():
    names = command_names()
    assert names[0] == "set_sim_time_scale"
    assert names[-1] == "discover_complete_dipdex"
    assert len(names) == len(set(names)) == len(CommandKind)


def test_common_prefix_of_spawn_commands():
    assert common_prefix(["spawn_pet", "spawn_poop", "spawn_food"]) == "spawn_"


def test_common_prefix_single_candidate_drops_last_char():
    assert common_prefix(["spawn_pet"]) == "spawn_pe"


def test_common_prefix_when_first_is_prefix_of_others():
    assert common_prefix(["ab", "abc"]) == "a"


def test_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        common_prefix([])


def test_complete_unique_command():
    assert complete_command("spawn_f") == "spawn_food"


def test_complete_ambiguous_command():
    assert complete_command("clear") == "clear_all_"


def test_complete_result_is_prefix_of_all_matches():
    completed = complete_command("sp")
    matching = [n for n in command_names() if n.startswith("sp")]
    assert all(n.startswith(completed) for n in matching)


def test_complete_no_match():
    assert complete_command("xyz") is None


def test_complete_empty_text():
    assert complete_command("") is None


def test_complete_food_name_unique():
    foods = ["apple", "apricot", "banana"]
    assert complete_command("spawn_food ban", foods) == "spawn_food banana"


def test_complete_food_name_shared_prefix():
    foods = ["apple", "apricot", "banana"]
    assert complete_command("spawn_food ap", foods) == "spawn_food ap"


def test_complete_food_without_database():
    assert complete_command("spawn_food ap", None) is None


def test_complete_argument_for_other_command():
    assert complete_command("spawn_pet ap", ["apple"]) is None


def test_complete_three_words():
    assert complete_command("spawn_food apple extra", ["apple"]) is None


def test_parse_sim_time_scale():
    command = parse_command("set_sim_time_scale 2.5")
    assert command == DevConsoleCommand(CommandKind.SET_SIM_TIME_SCALE, 2.5)
    assert command.command_str == "set_sim_time_scale"


def test_parse_bad_scale():
    assert parse_command("set_sim_time_scale abc") is None


@pytest.mark.parametrize(
    "kind",
    [
        CommandKind.SPAWN_PET,
        CommandKind.EVOLVE_PET,
        CommandKind.SPAWN_FOOD,
        CommandKind.CHANGE_LANGUAGE,
    ],
)
def test_parse_string_argument_round_trip(kind):
    assert parse_command(f"{kind.value} Blob extra") == DevConsoleCommand(kind, "Blob")


@pytest.mark.parametrize(
    "kind",
    [
        CommandKind.SPAWN_POOP,
        CommandKind.CLEAR_ALL_PETS,
        CommandKind.CLEAR_ALL_FOODS,
        CommandKind.DISCOVER_COMPLETE_DIPDEX,
    ],
)
def test_parse_commands_without_argument(kind):
    assert parse_command(kind.value) == DevConsoleCommand(kind)


def test_parse_missing_argument():
    assert parse_command("spawn_pet") is None


def test_parse_empty_line():
    assert parse_command("   ") is None


def test_parse_unknown_command():
    with pytest.raises(UnknownCommandError) as info:
        parse_command("dance now")
    assert info.value.command == "dance"
    assert str(info.value) == 'Unknown command: "dance"'