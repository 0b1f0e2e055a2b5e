import pytest

from securepass.app import SecurePassApp
from securepass.constants import DEFAULT_LENGTH, NO_OPTIONS_PLACEHOLDER
from securepass.exceptions import StorageError
from securepass.history import HistoryStore


def scripted_input(*answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


@pytest.fixture
def app(tmp_path, logger):
    return SecurePassApp(data_dir=str(tmp_path), logger=logger)


@pytest.mark.asyncio
async def test_defaults_match_initial_form(app):
    assert app.length == DEFAULT_LENGTH
    assert all(app.options.values())
    await app.stop()


@pytest.mark.asyncio
async def test_generate_records_history(app):
    await app.start()
    result = await app.generate_password()

    assert result.ok
    assert len(app.password) == DEFAULT_LENGTH
    assert [e.password for e in app.history] == [app.password]
    await app.stop()


@pytest.mark.asyncio
async def test_no_options_shows_placeholder_and_skips_history(app):
    await app.start()
    for name in list(app.options):
        app.toggle_option(name)

    app.set_length(12)
    result = await app.generate_password()

    assert not result.ok
    assert app.password == NO_OPTIONS_PLACEHOLDER
    assert await app.history_store.list(10) == []
    await app.stop()


@pytest.mark.asyncio
async def test_history_shows_ten_newest(app):
    await app.start()
    generated = []
    for _ in range(15):
        generated.append((await app.generate_password()).password)

    assert [e.password for e in app.history] == generated[::-1][:10]

    assert await app.clear_history()
    assert app.history == []
    await app.stop()


def test_set_length_bounds(app):
    assert app.set_length(6) == 6
    assert app.set_length(64) == 64
    with pytest.raises(ValueError):
        app.set_length(5)
    with pytest.raises(ValueError):
        app.set_length(65)


def test_toggle_unknown_option(app):
    with pytest.raises(KeyError):
        app.toggle_option("emoji")


class BrokenStore(HistoryStore):
    async def open(self):
        raise StorageError("disk full")

    async def add(self, password):
        raise StorageError("disk full")

    async def list(self, limit=10):
        raise StorageError("disk full")

    async def clear(self):
        raise StorageError("disk full")


@pytest.mark.asyncio
async def test_storage_errors_are_reported_not_raised(tmp_path, capsys):
    app = SecurePassApp(data_dir=str(tmp_path), history=BrokenStore(tmp_path / "x.db"))

    assert not await app.start()
    result = await app.generate_password()

    assert result.ok
    assert app.password == result.password
    assert app.history == []
    assert not await app.clear_history()
    assert isinstance(app.last_error, StorageError)
    assert "disk full" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_interactive_menu_flow(tmp_path, capsys):
    # set length to 8, turn off symbols, generate, show history, clear, exit
    app = SecurePassApp(
        data_dir=str(tmp_path),
        input_func=scripted_input("2", "8", "3", "4", "1", "4", "5", "6"),
    )

    await app.run_interactive_menu()

    out = capsys.readouterr().out
    assert app.length == 8
    assert app.options["symbols"] is False
    assert "=== History ===" in out
    assert "History cleared" in out
    assert app.history == []

    reopened = HistoryStore(tmp_path / "history.db")
    assert await reopened.list(10) == []
    await reopened.close()
