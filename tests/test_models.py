"""Tests for options and check results."""

import pytest

from pwnedpasswords.exceptions import InvalidConfiguration
from pwnedpasswords.models import PasswordCheckResult, PwnedPasswordsOptions, RiskLevel


class TestOptions:
    def test_defaults(self):
        options = PwnedPasswordsOptions()
        assert options.minimum_frequency_to_consider_pwned == 1
        assert options.add_padding is False

    @pytest.mark.parametrize("threshold", [0, -1, -100])
    def test_threshold_below_one_rejected(self, threshold):
        with pytest.raises(InvalidConfiguration):
            PwnedPasswordsOptions(minimum_frequency_to_consider_pwned=threshold)

    @pytest.mark.parametrize("threshold", [1.5, "3", True, None])
    def test_non_integer_threshold_rejected(self, threshold):
        with pytest.raises(InvalidConfiguration):
            PwnedPasswordsOptions(minimum_frequency_to_consider_pwned=threshold)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            PwnedPasswordsOptions(minimum_frequency_to_consider_pwned=0)

    def test_immutable(self):
        options = PwnedPasswordsOptions()
        with pytest.raises(AttributeError):
            options.add_padding = True

    def test_with_overrides_validates(self):
        options = PwnedPasswordsOptions().with_overrides(minimum_frequency_to_consider_pwned=20)
        assert options.minimum_frequency_to_consider_pwned == 20
        with pytest.raises(InvalidConfiguration):
            options.with_overrides(minimum_frequency_to_consider_pwned=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PWNED_PASSWORDS_MIN_FREQUENCY", "20")
        monkeypatch.setenv("PWNED_PASSWORDS_ADD_PADDING", "Yes")
        options = PwnedPasswordsOptions.from_env()
        assert options == PwnedPasswordsOptions(20, True)

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("PWNED_PASSWORDS_MIN_FREQUENCY", raising=False)
        monkeypatch.delenv("PWNED_PASSWORDS_ADD_PADDING", raising=False)
        assert PwnedPasswordsOptions.from_env() == PwnedPasswordsOptions()

    def test_from_env_empty_threshold_uses_default(self, monkeypatch):
        monkeypatch.setenv("PWNED_PASSWORDS_MIN_FREQUENCY", "")
        assert PwnedPasswordsOptions.from_env().minimum_frequency_to_consider_pwned == 1

    @pytest.mark.parametrize("value", ["abc", "0"])
    def test_from_env_invalid(self, monkeypatch, value):
        monkeypatch.setenv("PWNED_PASSWORDS_MIN_FREQUENCY", value)
        with pytest.raises(InvalidConfiguration):
            PwnedPasswordsOptions.from_env()

    def test_to_dict(self):
        assert PwnedPasswordsOptions(5, True).to_dict() == {
            "minimum_frequency_to_consider_pwned": 5,
            "add_padding": True,
        }


class TestPasswordCheckResult:
    @pytest.mark.parametrize("occurrences,level", [
        (0, RiskLevel.SAFE),
        (1, RiskLevel.LOW),
        (9, RiskLevel.LOW),
        (10, RiskLevel.MEDIUM),
        (99, RiskLevel.MEDIUM),
        (100, RiskLevel.HIGH),
        (9999, RiskLevel.HIGH),
        (10000, RiskLevel.CRITICAL),
    ])
    def test_risk_level(self, occurrences, level):
        assert PasswordCheckResult(occurrences=occurrences).risk_level == level

    def test_risk_description_formats_count(self):
        result = PasswordCheckResult(is_pwned=True, occurrences=3730471)
        assert "3,730,471" in result.risk_description

    def test_to_dict_has_no_suffix(self):
        result = PasswordCheckResult(is_pwned=True, occurrences=5, hash_prefix="5BAA6")
        data = result.to_dict()
        assert data["is_pwned"] is True
        assert data["occurrences"] == 5
        assert data["hash_prefix"] == "5BAA6"
        assert data["risk_level"] == "low"
        assert "1E4C9B93F3F0682250B6CF8331B7EE68FD8" not in str(data)
