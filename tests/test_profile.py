"""
test_profile — profile selection and build request validation.
"""
import pytest
from pydantic import ValidationError

from core.domain.models import BuildRequest
from core.domain.profile import Profile


class TestProfile:

    def test_from_bool(self):
        assert Profile.from_bool(True) is Profile.RELEASE
        assert Profile.from_bool(False) is Profile.DEBUG

    def test_directories(self):
        assert Profile.DEBUG.directory == "debug"
        assert Profile.RELEASE.directory == "release"

    def test_build_flags(self):
        """Only release mode adds a flag."""
        assert Profile.RELEASE.build_flags() == ["--release"]
        assert Profile.DEBUG.build_flags() == []


class TestBuildRequest:

    def test_defaults_to_debug(self):
        request = BuildRequest(binary_name="server")
        assert request.release is False
        assert request.profile is Profile.DEBUG

    def test_release_profile(self):
        assert BuildRequest(binary_name="server", release=True).profile is Profile.RELEASE

    @pytest.mark.parametrize("name", ["", " server", "bin/server", "..\\server", ".."])
    def test_rejects_bad_names(self, name):
        with pytest.raises(ValidationError):
            BuildRequest(binary_name=name)

    def test_accepts_dashed_names(self):
        assert BuildRequest(binary_name="file_search-cli").binary_name == "file_search-cli"
