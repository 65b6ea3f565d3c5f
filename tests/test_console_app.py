from epic_adventure.app import run_console
from epic_adventure.config import AdventureConfig


def scripted(*answers):
    it = iter(answers)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    fake_input.prompts = prompts
    return fake_input


def play(tmp_path, *answers, name=None):
    out = []
    fake_input = scripted(*answers)
    results = tmp_path / "game_results.txt"
    code = run_console(AdventureConfig(), player_name=name, results_path=results, input_fn=fake_input, output=out.append)
    return code, out, results, fake_input.prompts


def test_forest_then_quit(tmp_path):
    code, out, results, prompts = play(tmp_path, "Ada", "1", "5")
    assert code == 0
    assert prompts == ["Enter your name: ", "Your choice (1-5): ", "Your choice (1-5): "]
    assert "Ada takes 25 damage. Health: 75" in out
    assert "You have been arrested by local soldiers. Game over!" in out
    assert "Your adventure ends here, Ada! Game Over!" in out
    assert results.read_text(encoding="utf-8") == "Ada ended the game with 40 gold and 75 health."
    assert out[-1] == f"Game result saved to '{results}'."


def test_village_asks_merchant_question(tmp_path):
    code, out, results, prompts = play(tmp_path, "Ada", "3", " NO ", "5")
    assert prompts[2] == "Do you accept? (yes/no): "
    assert "A merchant offers you a deal: pay 20 gold for a map to hidden treasure." in out
    assert "Ada takes 10 damage. Health: 90" in out
    assert results.read_text(encoding="utf-8") == "Ada ended the game with 0 gold and 90 health."


def test_bad_input_reprompts(tmp_path):
    code, out, results, prompts = play(tmp_path, "Ada", "", "abc", "5")
    assert "No input detected. Please try again." in out
    assert "Invalid choice. Please try again." in out
    assert prompts.count("Your choice (1-5): ") == 3


def test_death_ends_session(tmp_path):
    code, out, results, prompts = play(tmp_path, "Ada", "1", "1", "1", "1")
    assert "You receive critical damage. You collapse and fade into darkness. Game Over!" in out
    assert results.read_text(encoding="utf-8") == "Ada ended the game with 120 gold and 0 health."


def test_end_of_input_defaults_name_and_quits(tmp_path):
    code, out, results, prompts = play(tmp_path)
    assert code == 0
    assert "Your adventure ends here, Steve! Game Over!" in out
    assert results.read_text(encoding="utf-8") == "Steve ended the game with 0 gold and 100 health."


def test_player_name_argument_skips_prompt(tmp_path):
    code, out, results, prompts = play(tmp_path, "5", name="Ada")
    assert prompts == ["Your choice (1-5): "]
    assert "Ada ended the game with 0 gold and 100 health." in out


def test_persistence_failure_does_not_change_outcome(tmp_path):
    out = []
    results = tmp_path / "no-such-dir" / "game_results.txt"
    code = run_console(
        AdventureConfig(),
        player_name="Ada",
        results_path=results,
        input_fn=scripted("5"),
        output=out.append,
    )
    assert code == 0
    assert "Your adventure ends here, Ada! Game Over!" in out
    assert out[-1].startswith("Error writing file: ")
    assert not results.exists()
