import re

import graphql_server_helper
from graphql_server_helper.version import (
    VersionInfo,
    graphql_core_requirement,
    version,
    version_info,
)

_re_version = re.compile(r"(\d+)\.(\d+)\.(\d+)(?:(a|b|r?c)(\d+))?$")


def describe_version():
    def describe_version_info_class():
        def create_version_info_from_fields():
            v = VersionInfo(1, 2, 3, "alpha", 4)
            assert v.major == 1
            assert v.minor == 2
            assert v.micro == 3
            assert v.releaselevel == "alpha"
            assert v.serial == 4

        def create_version_info_from_str():
            v = VersionInfo.from_str("1.2.3")
            assert v == (1, 2, 3, "final", 0)
            v = VersionInfo.from_str("1.2.3a4")
            assert v == (1, 2, 3, "alpha", 4)
            v = VersionInfo.from_str("1.2.3beta4")
            assert v == (1, 2, 3, "beta", 4)
            v = VersionInfo.from_str("12.34.56rc789")
            assert v == (12, 34, 56, "candidate", 789)

        def serialize_as_str():
            v = VersionInfo(1, 2, 3, "final", 0)
            assert str(v) == "1.2.3"
            v = VersionInfo(1, 2, 3, "alpha", 4)
            assert str(v) == "1.2.3a4"

    def describe_package_version():
        def base_package_has_correct_version():
            assert graphql_server_helper.__version__ == version
            assert graphql_server_helper.version == version

        def base_package_has_correct_version_info():
            assert graphql_server_helper.__version_info__ is version_info
            assert graphql_server_helper.version_info is version_info

        def version_has_correct_format():
            assert isinstance(version, str)
            assert _re_version.match(version)

        def version_info_has_correct_fields():
            assert isinstance(version_info, tuple)
            assert str(version_info) == version

        def graphql_core_requirement_is_a_version_range():
            assert re.match(r">=\d+\.\d+,<\d+\.\d+$", graphql_core_requirement)
