"""Unit tests for StarService."""

import logging

import pytest
from unittest.mock import Mock

from starcatalog.exceptions import InvalidArgumentError, StarNotFoundError
from starcatalog.models.domain import Star
from starcatalog.services.star_service import StarService


@pytest.fixture
def mock_repo():
    return Mock()


@pytest.fixture
def service(mock_repo, config_service):
    return StarService(mock_repo, config_service)


class TestFindClosestStars:
    """Test nearest-N selection."""

    def test_returns_closest_in_order(self, service, nearby_stars):
        """Test the two closest stars come back sorted by distance."""
        result = service.find_closest_stars(nearby_stars, 2)

        assert [s.name for s in result] == ["Alpha Centauri", "Barnard's Star"]

    def test_unsorted_input(self, service):
        """Test input order does not matter for the selection."""
        stars = [Star("Sirius", 9), Star("Wolf 359", 8), Star("Alpha Centauri", 4)]

        result = service.find_closest_stars(stars, 2)

        assert [s.distance for s in result] == [4, 8]

    def test_equal_distances_keep_input_order(self, service):
        """Test the sort is stable for stars at the same distance."""
        stars = [
            Star("Procyon", 11),
            Star("Luyten", 8),
            Star("Wolf 359", 8),
            Star("Lalande", 8),
            Star("Ross 128", 11),
        ]

        result = service.find_closest_stars(stars, 4)

        assert [s.name for s in result] == ["Luyten", "Wolf 359", "Lalande", "Procyon"]

    def test_size_larger_than_list_returns_all(self, service, nearby_stars):
        """Test oversize requests return every star."""
        result = service.find_closest_stars(nearby_stars, 10)

        assert len(result) == 4

    def test_size_zero(self, service, nearby_stars):
        assert service.find_closest_stars(nearby_stars, 0) == []

    def test_negative_size_raises(self, service, nearby_stars):
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            service.find_closest_stars(nearby_stars, -1)

    def test_input_not_modified(self, service):
        """Test a new list is returned and the input keeps its order."""
        stars = [Star("Sirius", 9), Star("Alpha Centauri", 4)]

        result = service.find_closest_stars(stars, 2)

        assert result is not stars
        assert [s.name for s in stars] == ["Sirius", "Alpha Centauri"]

    @pytest.mark.parametrize("stars", [None, []])
    def test_empty_input_raises(self, service, stars):
        with pytest.raises(InvalidArgumentError, match="cannot be null or empty"):
            service.find_closest_stars(stars, 2)

    def test_does_not_touch_repository(self, service, mock_repo, nearby_stars):
        service.find_closest_stars(nearby_stars, 2)

        assert mock_repo.method_calls == []


class TestNumberOfStarsByDistances:
    """Test grouping by distance."""

    def test_counts_per_distance(self, service):
        """Test stars sharing a distance are counted together."""
        stars = [
            Star("Alpha Centauri", 4),
            Star("Barnard's Star", 6),
            Star("Wolf 359", 8),
            Star("Sirius", 8),
        ]

        result = service.get_number_of_stars_by_distances(stars)

        assert result == {4: 1, 6: 1, 8: 2}
        assert sum(result.values()) == len(stars)
        assert 5 not in result

    def test_ascending_key_order(self, service):
        """Test iteration order follows distance, not input order."""
        stars = [Star("Sirius", 9), Star("Alpha Centauri", 4), Star("Wolf 359", 8), Star("Luyten", 4)]

        result = service.get_number_of_stars_by_distances(stars)

        assert list(result) == [4, 8, 9]
        assert result[4] == 2

    @pytest.mark.parametrize("stars", [None, []])
    def test_empty_input_raises(self, service, stars):
        with pytest.raises(InvalidArgumentError):
            service.get_number_of_stars_by_distances(stars)


class TestUniqueStars:
    """Test de-duplication by name."""

    def test_duplicates_removed_by_name(self, service):
        """Test a repeated name is dropped even with a different distance."""
        stars = [
            Star("Alpha Centauri", 4),
            Star("Barnard's Star", 6),
            Star("Wolf 359", 8),
            Star("Alpha Centauri", 9),
        ]

        result = service.get_unique_stars(stars)

        assert len(result) == 3
        assert [s.name for s in result] == ["Alpha Centauri", "Barnard's Star", "Wolf 359"]

    def test_first_occurrence_kept(self, service):
        stars = [Star("Alpha Centauri", 4), Star("Alpha Centauri", 9)]

        (only,) = service.get_unique_stars(stars)

        assert only.distance == 4

    def test_result_is_set_like(self, service, nearby_stars):
        """Test membership uses name equality."""
        result = service.get_unique_stars(nearby_stars)

        assert Star("Sirius", 1000) in result
        assert result & {Star("Sirius", 0)} == {Star("Sirius", 9)}

    def test_idempotent(self, service):
        stars = [Star("Wolf 359", 8), Star("Sirius", 9), Star("Wolf 359", 7)]

        first = service.get_unique_stars(stars)
        second = service.get_unique_stars(stars)

        assert list(first) == list(second)
        assert first == second

    def test_accepts_generator(self, service):
        result = service.get_unique_stars(Star(n, 1) for n in ["Vega", "Vega", "Deneb"])

        assert [s.name for s in result] == ["Vega", "Deneb"]

    @pytest.mark.parametrize("stars", [None, [], set()])
    def test_empty_input_raises(self, service, stars):
        with pytest.raises(InvalidArgumentError, match="collection"):
            service.get_unique_stars(stars)


class TestStarLifecycle:
    """Test CRUD orchestration against the repository."""

    def test_get_star_by_id(self, service, mock_repo):
        """Test an existing id returns the stored star."""
        expected = Star("Test Star", 10, id=1)
        mock_repo.get.return_value = expected

        result = service.get_star_by_id(1)

        assert result is expected
        mock_repo.get.assert_called_once_with(1)

    def test_get_star_by_id_not_found(self, service, mock_repo, caplog):
        """Test an absent id raises StarNotFoundError and logs the miss."""
        mock_repo.get.return_value = None

        with caplog.at_level(logging.ERROR, logger="starcatalog"):
            with pytest.raises(StarNotFoundError, match="Star not found with id: 2"):
                service.get_star_by_id(2)

        assert "Star not found with id: 2" in caplog.text

    def test_add_star(self, service, mock_repo):
        """Test the repository's saved value is returned unchanged."""
        new_star = Star("New Star", 15)
        saved = Star("New Star", 15, id=7)
        mock_repo.save.return_value = saved

        result = service.add_star(new_star)

        assert result is saved
        mock_repo.save.assert_called_once_with(new_star)

    def test_add_star_short_name(self, service, mock_repo):
        """Test names under three characters are rejected before saving."""
        with pytest.raises(InvalidArgumentError, match="at least 3 characters"):
            service.add_star(Star("Xi", 15))

        mock_repo.save.assert_not_called()

    def test_add_star_three_character_name(self, service, mock_repo):
        mock_repo.save.side_effect = lambda s: s

        assert service.add_star(Star("Sol", 0)).name == "Sol"

    def test_add_star_uses_configured_min_length(self, mock_repo, tmp_path):
        from starcatalog.services.config_service import ConfigService

        config_file = tmp_path / "strict.json"
        config_file.write_text('{"validation": {"minNameLength": 6}}')
        service = StarService(mock_repo, ConfigService(config_file))

        with pytest.raises(InvalidArgumentError, match="at least 6"):
            service.add_star(Star("Vega", 25))

    def test_update_star(self, service, mock_repo):
        """Test name and distance are overwritten and the id kept."""
        existing = Star("Existing Star", 20, id=1)
        mock_repo.get.return_value = existing
        mock_repo.save.side_effect = lambda s: s

        result = service.update_star(1, Star("Updated Star", 25))

        assert result.name == "Updated Star"
        assert result.distance == 25
        assert result.id == 1
        mock_repo.get.assert_called_once_with(1)
        mock_repo.save.assert_called_once_with(existing)

    def test_update_star_not_found(self, service, mock_repo):
        mock_repo.get.return_value = None

        with pytest.raises(StarNotFoundError):
            service.update_star(99, Star("Updated Star", 25))

        mock_repo.save.assert_not_called()

    def test_delete_star(self, service, mock_repo):
        """Test delete always delegates exactly once."""
        result = service.delete_star(1)

        assert result is None
        mock_repo.delete.assert_called_once_with(1)

    def test_delete_missing_star_is_silent(self, service, mock_repo):
        mock_repo.delete.return_value = False

        service.delete_star(404)

        mock_repo.delete.assert_called_once_with(404)
        mock_repo.get.assert_not_called()

    def test_list_stars(self, service, mock_repo, nearby_stars):
        mock_repo.list.return_value = nearby_stars

        assert service.list_stars() == nearby_stars
