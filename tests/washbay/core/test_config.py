import pytest

from washbay.core import config


def test_get_bool_parses_truthy_values() -> None:
    assert config._get_bool(' Yes ') is True
    assert config._get_bool('off') is False
    assert config._get_bool(None, default=True) is True


def test_get_int_falls_back_on_blank() -> None:
    assert config._get_int(None, 60) == 60
    assert config._get_int('  ', 60) == 60
    assert config._get_int('120', 60) == 120


def test_get_int_rejects_garbage() -> None:
    with pytest.raises(RuntimeError):
        config._get_int('ninety', 60)


def test_get_list_splits_on_commas() -> None:
    assert config._get_list('http://a.test, ,http://b.test', []) == ['http://a.test', 'http://b.test']
    assert config._get_list(None, ['x']) == ['x']


def test_load_scheduler_settings_reads_module_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'DEFAULT_SERVICE_DURATION_MINUTES', 120)
    monkeypatch.setattr(config, 'MAX_SUGGESTIONS', 2)

    settings = config.load_scheduler_settings()

    assert settings.default_duration_minutes == 120
    assert settings.max_suggestions == 2


@pytest.mark.parametrize(
    ('attribute', 'value'),
    [
        ('DEFAULT_SERVICE_DURATION_MINUTES', 0),
        ('SUGGESTION_MAX_OFFSET_HOURS', -1),
        ('SUGGESTION_MAX_OFFSET_HOURS', 4),
        ('MAX_SUGGESTIONS', -1),
    ],
)
def test_validate_runtime_config_rejects_bad_values(monkeypatch: pytest.MonkeyPatch, attribute: str, value: int) -> None:
    monkeypatch.setattr(config, attribute, value)

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()


def test_validate_runtime_config_rejects_wildcard_cors_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'production')
    monkeypatch.setattr(config, 'CORS_ALLOW_ORIGINS', ['*'])

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()
