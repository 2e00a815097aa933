"""
Tests for PlayerService: Riot ids and team names.
"""

import pytest

from services import error_codes


class TestRiotId:
    def test_set_valid_riot_id(self, player_service):
        result = player_service.set_riot_id(1, "Martige#NA1")

        assert result.success
        assert player_service.get_riot_id(1) == "Martige#NA1"
        assert player_service.has_riot_id(1)

    @pytest.mark.parametrize("raw", ["Martige", "#NA1", "Martige#", "no tag here"])
    def test_invalid_format_rejected(self, player_service, raw):
        result = player_service.set_riot_id(1, raw)

        assert result.error_code == error_codes.INVALID_RIOT_ID
        assert player_service.has_riot_id(1) is False

    def test_missing_argument(self, player_service):
        result = player_service.set_riot_id(1, None)

        assert result.error_code == error_codes.VALIDATION_ERROR


class TestTeamName:
    def test_default_when_unset(self, player_service):
        assert player_service.get_team_name(7, "captain7") == "captain7"
        assert player_service.get_team_name(None, "A") == "A"

    def test_set_and_get(self, player_service):
        assert player_service.set_team_name(7, "  Night Owls ").success
        assert player_service.get_team_name(7, "captain7") == "Night Owls"

    def test_limit_is_inclusive(self, player_service):
        assert player_service.set_team_name(7, "x" * 25).success

    def test_over_limit_reports_overflow(self, player_service):
        result = player_service.set_team_name(7, "x" * 28)

        assert result.error_code == error_codes.INVALID_TEAM_NAME
        assert "by 3" in result.error
        assert player_service.get_team_name(7, "default") == "default"

    def test_empty_name(self, player_service):
        result = player_service.set_team_name(7, "   ")

        assert result.error_code == error_codes.VALIDATION_ERROR
