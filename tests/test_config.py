from datetime import timedelta

from mlb_news.config import DEFAULT_REQUEST_DELAY, load_settings


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MLB_NEWS_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("MLB_NEWS_WINDOW_BUFFER_HOURS", "3")
    monkeypatch.setenv("MLB_NEWS_REQUEST_DELAY", "soon")

    settings = load_settings(str(tmp_path / "missing.env"))

    assert settings.request_timeout == 2.5
    assert settings.window_buffer == timedelta(hours=3)
    assert settings.request_delay == DEFAULT_REQUEST_DELAY


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    # register the variable so monkeypatch restores it after load_dotenv sets it
    monkeypatch.setenv("MLB_NEWS_USER_AGENT", "placeholder")
    monkeypatch.delenv("MLB_NEWS_USER_AGENT")
    env = tmp_path / ".env"
    env.write_text("MLB_NEWS_USER_AGENT=tester/1.0\n", encoding="utf-8")

    settings = load_settings(str(env))

    assert settings.user_agent == "tester/1.0"
