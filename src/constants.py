"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    RESOLUTION_ERROR = 4


class InputKinds(Enum):
    """Manifest input kinds supported by the program.

    Args:
        Enum (string): Manifest input kinds supported by the program.
    """

    MANIFEST = "manifest"
    GRADLE = "gradle"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    GRADLE_KTS_FILE = "build.gradle.kts"
    VERSION_CATALOG_FILE = "libs.versions.toml"
    CATALOG_ACCESSOR = "libs"
    OUTPUT_FORMATS = ["json", "csv"]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "DEPRESOLVE_LOG_LEVEL"
    ENV_CONFIG = "DEPRESOLVE_CONFIG"

    # Gradle configuration name -> role value
    DEFAULT_CONFIGURATION_ROLES = {
        "optionalApi": "optional-compile",
        "optionalImplementation": "optional-compile",
        "compileOnly": "optional-compile",
        "compileOnlyApi": "optional-compile",
        "api": "compile-and-export",
        "implementation": "compile-and-export",
        "runtimeOnly": "compile-and-export",
        "testImplementation": "test-only",
        "testCompileOnly": "test-only",
        "testRuntimeOnly": "test-only",
        "testApi": "test-only",
    }
    PLATFORM_FUNCTIONS = ["platform", "enforcedPlatform"]
