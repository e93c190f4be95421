"""Static registry of project options and what each one contributes.

Every recognised option value (language, testing framework, logging
framework, license, repository) is described as data: the plugin ids,
dependencies, repositories and file templates it adds to a project.  The
resolver merges these records; nothing here has per-option behaviour.

The registry is built once at import time and exposed read-only through the
module-level ``CATALOG`` instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .models import (
    Dependency,
    Language,
    License,
    LoggingFramework,
    Repository,
    Scope,
    TestingFramework,
)


# ---------------------------------------------------------------------------
# Pinned versions
# ---------------------------------------------------------------------------

KOTLIN_VERSION = "1.9.24"
GROOVY_VERSION = "4.0.21"
SCALA_VERSION = "2.13.14"
JUNIT4_VERSION = "4.13.2"
JUNIT_JUPITER_VERSION = "5.10.2"
JUNIT_PLATFORM_VERSION = "1.10.2"
TESTNG_VERSION = "7.5.1"
SPOCK_VERSION = "2.3-groovy-4.0"
SLF4J_VERSION = "2.0.13"
LOG4J_VERSION = "2.23.1"
LOGBACK_VERSION = "1.5.6"
COMMONS_LOGGING_VERSION = "1.3.2"


@dataclass(frozen=True)
class Contribution:
    """What a single option value adds to a generated project.

    Attributes:
        plugins: Plugin ids applied in the build script.
        dependencies: Dependencies, each carrying its own scope.
        repositories: Repositories the dependencies are fetched from.
        templates: ``(output path, template name)`` pairs rendered into the
            project, e.g. a logging configuration file.
        test_directive: Statement placed in the ``test`` task when the
            framework needs an explicit opt-in beyond its dependency.
        test_languages: Languages whose test source root the framework
            needs even when the project does not use them for main sources.
    """

    plugins: tuple[str, ...] = ()
    dependencies: tuple[Dependency, ...] = ()
    repositories: tuple[Repository, ...] = ()
    templates: tuple[tuple[str, str], ...] = ()
    test_directive: Optional[str] = None
    test_languages: tuple[Language, ...] = ()


_NOTHING = Contribution()


def _dep(notation: str, scope: Scope = Scope.COMPILE) -> Dependency:
    return Dependency.parse(notation, scope)


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

_LANGUAGES: dict[Language, Contribution] = {
    # The java plugin ships with Gradle and needs no library
    Language.JAVA: Contribution(plugins=("java",)),
    Language.GROOVY: Contribution(
        plugins=("groovy",),
        dependencies=(_dep(f"org.apache.groovy:groovy:{GROOVY_VERSION}"),),
        repositories=(Repository.MAVEN_CENTRAL,),
    ),
    Language.SCALA: Contribution(
        plugins=("scala",),
        dependencies=(_dep(f"org.scala-lang:scala-library:{SCALA_VERSION}"),),
        repositories=(Repository.MAVEN_CENTRAL,),
    ),
    Language.KOTLIN: Contribution(
        plugins=("kotlin",),
        dependencies=(
            _dep(f"org.jetbrains.kotlin:kotlin-gradle-plugin:{KOTLIN_VERSION}", Scope.CLASSPATH),
            _dep(f"org.jetbrains.kotlin:kotlin-stdlib:{KOTLIN_VERSION}"),
        ),
        repositories=(Repository.MAVEN_CENTRAL,),
    ),
}

_TESTING: dict[TestingFramework, Contribution] = {
    TestingFramework.NONE: _NOTHING,
    TestingFramework.JUNIT: Contribution(
        dependencies=(_dep(f"junit:junit:{JUNIT4_VERSION}", Scope.TEST),),
        repositories=(Repository.MAVEN_CENTRAL,),
    ),
    TestingFramework.JUNIT_JUPITER: Contribution(
        dependencies=(
            _dep(f"org.junit.jupiter:junit-jupiter:{JUNIT_JUPITER_VERSION}", Scope.TEST),
            _dep(
                f"org.junit.platform:junit-platform-launcher:{JUNIT_PLATFORM_VERSION}",
                Scope.TEST_RUNTIME,
            ),
        ),
        repositories=(Repository.MAVEN_CENTRAL,),
        test_directive="useJUnitPlatform()",
    ),
    TestingFramework.TESTNG: Contribution(
        dependencies=(_dep(f"org.testng:testng:{TESTNG_VERSION}", Scope.TEST),),
        repositories=(Repository.MAVEN_CENTRAL,),
        test_directive="useTestNG()",
    ),
    TestingFramework.SPOCK: Contribution(
        # Spock specifications are Groovy sources
        plugins=("groovy",),
        dependencies=(
            _dep(f"org.spockframework:spock-core:{SPOCK_VERSION}", Scope.TEST),
            _dep(
                f"org.junit.platform:junit-platform-launcher:{JUNIT_PLATFORM_VERSION}",
                Scope.TEST_RUNTIME,
            ),
        ),
        repositories=(Repository.MAVEN_CENTRAL,),
        test_directive="useJUnitPlatform()",
        test_languages=(Language.GROOVY,),
    ),
}

_LOGGING: dict[LoggingFramework, Contribution] = {
    LoggingFramework.NONE: _NOTHING,
    LoggingFramework.SLF4J: Contribution(
        dependencies=(
            _dep(f"org.slf4j:slf4j-api:{SLF4J_VERSION}"),
            _dep(f"org.slf4j:slf4j-simple:{SLF4J_VERSION}"),
        ),
        repositories=(Repository.MAVEN_CENTRAL,),
        templates=(
            ("src/main/resources/simplelogger.properties", "logging/simplelogger.properties.j2"),
        ),
    ),
    LoggingFramework.LOG4J: Contribution(
        dependencies=(
            _dep(f"org.apache.logging.log4j:log4j-api:{LOG4J_VERSION}"),
            _dep(f"org.apache.logging.log4j:log4j-core:{LOG4J_VERSION}"),
        ),
        repositories=(Repository.MAVEN_CENTRAL,),
        templates=(("src/main/resources/log4j2.xml", "logging/log4j2.xml.j2"),),
    ),
    LoggingFramework.LOGBACK_CLASSIC: Contribution(
        dependencies=(_dep(f"ch.qos.logback:logback-classic:{LOGBACK_VERSION}"),),
        repositories=(Repository.MAVEN_CENTRAL,),
        templates=(("src/main/resources/logback.xml", "logging/logback.xml.j2"),),
    ),
    LoggingFramework.COMMONS_LOGGING: Contribution(
        dependencies=(_dep(f"commons-logging:commons-logging:{COMMONS_LOGGING_VERSION}"),),
        repositories=(Repository.MAVEN_CENTRAL,),
    ),
}

_LICENSES: dict[License, Optional[str]] = {
    License.NONE: None,
    License.APACHE: "licenses/apache.txt.j2",
    License.MIT: "licenses/mit.txt.j2",
    License.BSD_2_CLAUSE: "licenses/bsd_2_clause.txt.j2",
    License.BSD_3_CLAUSE: "licenses/bsd_3_clause.txt.j2",
    License.UNLICENSE: "licenses/unlicense.txt.j2",
}

_REPOSITORIES: dict[Repository, str] = {
    Repository.MAVEN_CENTRAL: "mavenCentral()",
    Repository.JCENTER: "jcenter()",
    Repository.MAVEN_LOCAL: "mavenLocal()",
    Repository.GOOGLE: "google()",
    Repository.GRADLE_PLUGIN_PORTAL: "gradlePluginPortal()",
}

# Conventional source root directory names under src/main and src/test
_SOURCE_ROOTS: dict[Language, str] = {lang: lang.value for lang in Language}


# ---------------------------------------------------------------------------
# OptionCatalog
# ---------------------------------------------------------------------------

class OptionCatalog:
    """Read-only lookup over every option registry.

    Instances share nothing mutable and are safe to read from any number of
    threads.  Looking up an option that is not registered is a programming
    error (descriptors are validated upstream) and fails an assertion.
    """

    def __init__(self) -> None:
        # str enums of different types can compare equal ("none"), so each
        # option type keeps its own registry
        self._contributions: Mapping[type[Enum], Mapping[Enum, Contribution]] = MappingProxyType({
            Language: MappingProxyType(dict(_LANGUAGES)),
            TestingFramework: MappingProxyType(dict(_TESTING)),
            LoggingFramework: MappingProxyType(dict(_LOGGING)),
        })
        self._licenses: Mapping[License, Optional[str]] = MappingProxyType(dict(_LICENSES))
        self._repositories: Mapping[Repository, str] = MappingProxyType(dict(_REPOSITORIES))
        self._source_roots: Mapping[Language, str] = MappingProxyType(dict(_SOURCE_ROOTS))

    def contribution(
        self, option: Language | TestingFramework | LoggingFramework
    ) -> Contribution:
        """Return the contribution record for a language or framework."""
        registry = self._contributions.get(type(option), {})
        assert option in registry, f"Unregistered option: {option!r}"
        return registry[option]

    def license_template(self, license: License) -> Optional[str]:
        """Template name of the license text, or ``None`` for ``License.NONE``."""
        assert license in self._licenses, f"Unregistered license: {license!r}"
        return self._licenses[license]

    def repository_call(self, repository: Repository) -> str:
        """Gradle DSL call that declares *repository*."""
        assert repository in self._repositories, f"Unregistered repository: {repository!r}"
        return self._repositories[repository]

    def source_root(self, language: Language) -> str:
        """Directory name holding *language* sources (``java``, ``kotlin``...)."""
        return self._source_roots[language]

    def options(self) -> dict[str, dict[str, Any]]:
        """Every registry with its values and default, keyed by option name."""
        return {
            "language": {
                "values": [lang.name.lower() for lang in Language],
                "default": Language.JAVA.name.lower(),
            },
            "testing": {
                "values": [t.name.lower() for t in TestingFramework],
                "default": TestingFramework.NONE.name.lower(),
            },
            "logging": {
                "values": [lg.name.lower() for lg in LoggingFramework],
                "default": LoggingFramework.NONE.name.lower(),
            },
            "license": {
                "values": [lic.name.lower() for lic in License],
                "default": License.NONE.name.lower(),
            },
            "repository": {
                "values": [repo.name.lower() for repo in Repository],
                "default": None,
            },
        }


CATALOG = OptionCatalog()
