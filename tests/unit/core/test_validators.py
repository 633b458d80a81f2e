"""
Tests pour VideoValidator et Video.validate().
"""

import pytest

from videocatalog.core.exceptions import (
    MaxLengthExceededError,
    RequiredFieldError,
    VideoValidationError,
)
from videocatalog.core.validators import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    VideoValidator,
)


class TestTitleRules:
    """Tests pour les regles sur le titre."""

    def test_empty_title(self, make_video):
        """Titre vide -> RequiredFieldError('Title') meme si la description est valide."""
        video = make_video(title="")
        with pytest.raises(RequiredFieldError) as exc_info:
            video.validate()
        assert exc_info.value.field_name == "Title"

    def test_whitespace_title(self, make_video):
        video = make_video(title="   \t")
        with pytest.raises(RequiredFieldError) as exc_info:
            video.validate()
        assert exc_info.value.field_name == "Title"

    def test_title_too_long(self, make_video):
        video = make_video(title="a" * 256)
        with pytest.raises(MaxLengthExceededError) as exc_info:
            video.validate()
        assert exc_info.value.field_name == "Title"
        assert exc_info.value.limit == 255

    def test_title_at_limit(self, make_video):
        make_video(title="a" * TITLE_MAX_LENGTH).validate()


class TestDescriptionRules:
    """Tests pour les regles sur la description."""

    def test_empty_description(self, make_video):
        video = make_video(description=" ")
        with pytest.raises(RequiredFieldError) as exc_info:
            video.validate()
        assert exc_info.value.field_name == "Description"

    def test_description_too_long(self, make_video):
        video = make_video(description="d" * 4001)
        with pytest.raises(MaxLengthExceededError) as exc_info:
            video.validate()
        assert exc_info.value.field_name == "Description"
        assert exc_info.value.limit == 4000

    def test_description_at_limit(self, make_video):
        make_video(description="d" * DESCRIPTION_MAX_LENGTH).validate()


class TestValidatorBehaviour:
    """Tests pour l'ordre des regles et l'absence d'effet de bord."""

    def test_title_checked_first(self, make_video):
        video = make_video(title="", description="")
        with pytest.raises(RequiredFieldError) as exc_info:
            VideoValidator(video).validate()
        assert exc_info.value.field_name == "Title"

    def test_errors_share_base_class(self, make_video):
        with pytest.raises(VideoValidationError):
            make_video(title="t" * 300).validate()

    def test_video_unchanged_after_failure(self, make_video):
        video = make_video(title="")
        with pytest.raises(RequiredFieldError):
            video.validate()
        assert video.title == ""
        assert video.description == "Un voleur s'infiltre dans les reves."

    def test_valid_video_passes(self, make_video):
        assert make_video().validate() is None
