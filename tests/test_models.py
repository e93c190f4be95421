"""Unit tests for the descriptor model (gradle_bootstrap.models).

Tests cover:
- Dependency notation parsing and identity
- BuildModel ordered-set handling and classpath scoping
- ProjectDescriptor field constraints and language ordering
- from_options parsing of loosely typed request options
- from_file loading from YAML and JSON
- RenderPlan path and duplicate checks
- RenderReport.missing
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from gradle_bootstrap.errors import ValidationError
from gradle_bootstrap.models import (
    BuildModel,
    Constraints,
    Dependency,
    FileEntry,
    Language,
    License,
    LoggingFramework,
    ProjectDescriptor,
    RenderPlan,
    RenderReport,
    Repository,
    Scope,
    TestingFramework,
)


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------


class TestDependency:
    @pytest.mark.unit
    def test_parse_with_version(self):
        dep = Dependency.parse("org.testng:testng:7.5.1", Scope.TEST)
        assert dep.group == "org.testng"
        assert dep.artifact == "testng"
        assert dep.version == "7.5.1"
        assert dep.scope is Scope.TEST

    @pytest.mark.unit
    def test_parse_without_version(self):
        dep = Dependency.parse("com.example:lib")
        assert dep.version is None
        assert dep.scope is Scope.COMPILE
        assert dep.notation == "com.example:lib"

    @pytest.mark.unit
    @pytest.mark.parametrize("notation", ["justone", "a:b:c:d", "a::c", ""])
    def test_parse_rejects_bad_notation(self, notation):
        with pytest.raises(ValueError):
            Dependency.parse(notation)

    @pytest.mark.unit
    def test_rejects_quote_in_coordinates(self):
        with pytest.raises(PydanticValidationError):
            Dependency(group="com.example'", artifact="lib")

    @pytest.mark.unit
    def test_key_includes_scope(self):
        compile_dep = Dependency.parse("a:b:1")
        test_dep = Dependency.parse("a:b:2", Scope.TEST)
        assert compile_dep.key == ("a", "b", Scope.COMPILE)
        assert compile_dep.key != test_dep.key

    @pytest.mark.unit
    def test_scope_values_are_gradle_configurations(self):
        assert Scope.COMPILE.value == "implementation"
        assert Scope.TEST.value == "testImplementation"
        assert Scope.CLASSPATH.value == "classpath"


class TestTestingFrameworkEnum:
    @pytest.mark.unit
    def test_not_collected_as_test_class(self):
        assert TestingFramework.__test__ is False
        assert "__test__" not in TestingFramework.__members__
        assert [t.value for t in TestingFramework] == [
            "none", "junit", "junit_jupiter", "testng", "spock",
        ]


# ---------------------------------------------------------------------------
# BuildModel
# ---------------------------------------------------------------------------


class TestBuildModel:
    @pytest.mark.unit
    def test_defaults(self):
        build = BuildModel()
        assert build.testing is TestingFramework.NONE
        assert build.logging is LoggingFramework.NONE
        assert build.project_context == ()
        assert build.dependencies == ()
        assert build.plugins == ()

    @pytest.mark.unit
    def test_repositories_deduplicated_in_order(self):
        build = BuildModel(project_context=[
            Repository.JCENTER, Repository.MAVEN_CENTRAL, Repository.JCENTER,
        ])
        assert build.project_context == (Repository.JCENTER, Repository.MAVEN_CENTRAL)

    @pytest.mark.unit
    def test_plugins_deduplicated_in_order(self):
        build = BuildModel(plugins=["application", "idea", "application"])
        assert build.plugins == ("application", "idea")

    @pytest.mark.unit
    def test_invalid_plugin_id_rejected(self):
        with pytest.raises(PydanticValidationError):
            BuildModel(plugins=["bad id"])

    @pytest.mark.unit
    def test_gradle_plugins_forced_to_classpath(self):
        build = BuildModel(gradle_plugins=[Dependency.parse("net.swisstech:gradle-dropwizard")])
        assert build.gradle_plugins[0].scope is Scope.CLASSPATH

    @pytest.mark.unit
    def test_frozen(self):
        build = BuildModel()
        with pytest.raises(PydanticValidationError):
            build.testing = TestingFramework.JUNIT


# ---------------------------------------------------------------------------
# ProjectDescriptor
# ---------------------------------------------------------------------------


class TestProjectDescriptor:
    @pytest.mark.unit
    def test_defaults(self, java_descriptor):
        assert java_descriptor.version == Constraints.DEFAULT_VERSION
        assert java_descriptor.license is License.NONE
        assert java_descriptor.git_repo is None
        assert java_descriptor.git_init is False
        assert java_descriptor.wants_source_control is False

    @pytest.mark.unit
    def test_languages_sorted_by_declared_order(self, make_descriptor):
        d = make_descriptor(languages=[Language.KOTLIN, Language.JAVA, Language.SCALA])
        assert d.languages == (Language.JAVA, Language.SCALA, Language.KOTLIN)

    @pytest.mark.unit
    def test_languages_deduplicated(self, make_descriptor):
        d = make_descriptor(languages=[Language.GROOVY, Language.GROOVY])
        assert d.languages == (Language.GROOVY,)

    @pytest.mark.unit
    def test_empty_languages_rejected(self, make_descriptor):
        with pytest.raises(PydanticValidationError, match="At least one language"):
            make_descriptor(languages=())

    @pytest.mark.unit
    @pytest.mark.parametrize("group", ["com..example", "com.1example", "com.exa-mple", ""])
    def test_invalid_group_rejected(self, make_descriptor, group):
        with pytest.raises(PydanticValidationError):
            make_descriptor(group=group)

    @pytest.mark.unit
    def test_group_part_too_long_rejected(self, make_descriptor):
        with pytest.raises(PydanticValidationError):
            make_descriptor(group="com." + "a" * (Constraints.DIR_MAX_LENGTH + 1))

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["", "-leading", "has space", "a/b", "x" * 101])
    def test_invalid_name_rejected(self, make_descriptor, name):
        with pytest.raises(PydanticValidationError):
            make_descriptor(name=name)

    @pytest.mark.unit
    def test_version_too_long_rejected(self, make_descriptor):
        with pytest.raises(PydanticValidationError):
            make_descriptor(version="1" * (Constraints.VERSION_MAX_LENGTH + 1))

    @pytest.mark.unit
    @pytest.mark.parametrize("url", ["ftp://example.com/repo.git", "not a url", "https://"])
    def test_invalid_git_repo_rejected(self, make_descriptor, url):
        with pytest.raises(PydanticValidationError):
            make_descriptor(git_repo=url)

    @pytest.mark.unit
    def test_empty_git_repo_is_none(self, make_descriptor):
        assert make_descriptor(git_repo="").git_repo is None

    @pytest.mark.unit
    def test_package_path(self, make_descriptor):
        assert make_descriptor(group="com.example.app").package_path == "com/example/app"

    @pytest.mark.unit
    def test_license_holder_defaults_to_group(self, make_descriptor):
        assert make_descriptor().license_holder == "com.example"
        assert make_descriptor(copyright_holder="Jane Doe").license_holder == "Jane Doe"

    @pytest.mark.unit
    def test_frozen(self, java_descriptor):
        with pytest.raises(PydanticValidationError):
            java_descriptor.name = "other"


# ---------------------------------------------------------------------------
# from_options
# ---------------------------------------------------------------------------


class TestFromOptions:
    @pytest.mark.unit
    def test_minimal(self):
        d = ProjectDescriptor.from_options("demo", "com.example", "java")
        assert d.languages == (Language.JAVA,)
        assert d.version == "0.1"
        assert d.build.testing is TestingFramework.NONE
        assert d.build.logging is LoggingFramework.NONE
        assert d.license is License.NONE

    @pytest.mark.unit
    def test_enum_names_case_insensitive(self):
        d = ProjectDescriptor.from_options(
            "demo", "com.example", "Kotlin,JAVA",
            testing="TestNG", logging="logback_classic", license="Apache",
        )
        assert d.languages == (Language.JAVA, Language.KOTLIN)
        assert d.build.testing is TestingFramework.TESTNG
        assert d.build.logging is LoggingFramework.LOGBACK_CLASSIC
        assert d.license is License.APACHE

    @pytest.mark.unit
    def test_languages_as_list(self):
        d = ProjectDescriptor.from_options("demo", "com.example", ["scala", Language.GROOVY])
        assert d.languages == (Language.GROOVY, Language.SCALA)

    @pytest.mark.unit
    def test_unknown_enum_value(self):
        with pytest.raises(ValidationError, match="case insensitive") as exc_info:
            ProjectDescriptor.from_options("demo", "com.example", "java", testing="mocha")
        assert exc_info.value.field == "testing"

    @pytest.mark.unit
    def test_unknown_language(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectDescriptor.from_options("demo", "com.example", "java,cobol")
        assert exc_info.value.field == "languages"

    @pytest.mark.unit
    @pytest.mark.parametrize("missing", ["name", "group", "languages"])
    def test_missing_required(self, missing):
        options = {"name": "demo", "group": "com.example", "languages": "java"}
        options[missing] = ""
        with pytest.raises(ValidationError, match="Missing or empty") as exc_info:
            ProjectDescriptor.from_options(
                options["name"], options["group"], options["languages"]
            )
        assert exc_info.value.field == missing

    @pytest.mark.unit
    def test_invalid_group_reports_field(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectDescriptor.from_options("demo", "com.9bad", "java")
        assert exc_info.value.field == "group"
        assert "Java identifier" in str(exc_info.value)

    @pytest.mark.unit
    def test_git_url_implies_init(self):
        d = ProjectDescriptor.from_options(
            "demo", "com.example", "java", git_url="https://example.com/repo.git"
        )
        assert d.git_init is True
        assert d.git_repo == "https://example.com/repo.git"

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("TRUE", True), ("false", False), ("yes", False), (None, False), (True, True),
    ])
    def test_git_init_parsing(self, value, expected):
        d = ProjectDescriptor.from_options("demo", "com.example", "java", git_init=value)
        assert d.git_init is expected

    @pytest.mark.unit
    def test_bad_git_url(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectDescriptor.from_options(
                "demo", "com.example", "java", git_url="ftp://example.com/repo"
            )
        assert exc_info.value.field == "git_repo"

    @pytest.mark.unit
    def test_repositories_and_dependencies(self):
        d = ProjectDescriptor.from_options(
            "demo", "com.example", "java",
            repositories="maven_central,jcenter",
            dependencies=["com.google.guava:guava:33.2.0-jre",
                          {"group": "org.mockito", "artifact": "mockito-core", "scope": "test"}],
            gradle_plugins=["net.swisstech:gradle-dropwizard:1.1.4"],
            plugins=["application"],
        )
        assert d.build.project_context == (Repository.MAVEN_CENTRAL, Repository.JCENTER)
        assert d.build.dependencies[0].notation == "com.google.guava:guava:33.2.0-jre"
        assert d.build.dependencies[1].scope is Scope.TEST
        assert d.build.gradle_plugins[0].scope is Scope.CLASSPATH
        assert d.build.plugins == ("application",)

    @pytest.mark.unit
    def test_bad_dependency_notation(self):
        with pytest.raises(ValidationError) as exc_info:
            ProjectDescriptor.from_options("demo", "com.example", "java", dependencies=["nope"])
        assert exc_info.value.field == "dependencies"

    @pytest.mark.unit
    def test_single_plugin_string(self):
        d = ProjectDescriptor.from_options("demo", "com.example", "java", plugins="application")
        assert d.build.plugins == ("application",)

    @pytest.mark.unit
    def test_comma_separated_plugins(self):
        d = ProjectDescriptor.from_options(
            "demo", "com.example", "java", plugins="application, idea"
        )
        assert d.build.plugins == ("application", "idea")

    @pytest.mark.unit
    def test_single_dependency_strings(self):
        d = ProjectDescriptor.from_options(
            "demo", "com.example", "java",
            dependencies="com.google.guava:guava:33.2.0-jre,org.slf4j:slf4j-api",
            gradle_plugins="net.swisstech:gradle-dropwizard:1.1.4",
        )
        assert [dep.notation for dep in d.build.dependencies] == [
            "com.google.guava:guava:33.2.0-jre", "org.slf4j:slf4j-api",
        ]
        assert [dep.notation for dep in d.build.gradle_plugins] == [
            "net.swisstech:gradle-dropwizard:1.1.4",
        ]

    @pytest.mark.unit
    def test_single_dependency_mapping(self):
        d = ProjectDescriptor.from_options(
            "demo", "com.example", "java",
            dependencies={"group": "org.mockito", "artifact": "mockito-core", "scope": "test"},
        )
        assert len(d.build.dependencies) == 1
        assert d.build.dependencies[0].scope is Scope.TEST

    @pytest.mark.unit
    @pytest.mark.parametrize("version,expected", [(1.0, "1.0"), (2, "2"), ("0.3", "0.3")])
    def test_numeric_version(self, version, expected):
        d = ProjectDescriptor.from_options("demo", "com.example", "java", version=version)
        assert d.version == expected

    @pytest.mark.unit
    def test_numeric_name(self):
        assert ProjectDescriptor.from_options(2024, "com.example", "java").name == "2024"

    @pytest.mark.unit
    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            ProjectDescriptor.from_options("demo", "com.example", "")


# ---------------------------------------------------------------------------
# from_file
# ---------------------------------------------------------------------------


class TestFromFile:
    @pytest.mark.unit
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text(
            "name: demo\n"
            "group: com.example\n"
            "languages: [kotlin, java]\n"
            "testing: testng\n"
            "license: mit\n"
            "git_url: https://example.com/demo.git\n"
            "copyright_year: 2020\n",
            encoding="utf-8",
        )
        d = ProjectDescriptor.from_file(path)
        assert d.languages == (Language.JAVA, Language.KOTLIN)
        assert d.build.testing is TestingFramework.TESTNG
        assert d.license is License.MIT
        assert d.git_init is True
        assert d.copyright_year == 2020

    @pytest.mark.unit
    def test_json(self, tmp_path: Path):
        path = tmp_path / "project.json"
        path.write_text(json.dumps({
            "name": "demo", "group": "com.example", "languages": "scala",
            "repositories": ["google"],
        }), encoding="utf-8")
        d = ProjectDescriptor.from_file(path)
        assert d.languages == (Language.SCALA,)
        assert d.build.project_context == (Repository.GOOGLE,)

    @pytest.mark.unit
    def test_yaml_scalars(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text(
            "name: demo\n"
            "group: com.example\n"
            "languages: java\n"
            "version: 1.0\n"
            "plugins: application\n"
            "dependencies: com.google.guava:guava:33.2.0-jre\n",
            encoding="utf-8",
        )
        d = ProjectDescriptor.from_file(path)
        assert d.version == "1.0"
        assert d.build.plugins == ("application",)
        assert d.build.dependencies[0].artifact == "guava"

    @pytest.mark.unit
    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text("name: demo\ngroup: com.example\nlanguages: java\ncolour: red\n")
        with pytest.raises(ValidationError, match="colour"):
            ProjectDescriptor.from_file(path)

    @pytest.mark.unit
    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValidationError, match="mapping"):
            ProjectDescriptor.from_file(path)

    @pytest.mark.unit
    def test_malformed_yaml(self, tmp_path: Path):
        path = tmp_path / "project.yaml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(ValidationError, match="Cannot parse"):
            ProjectDescriptor.from_file(path)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            ProjectDescriptor.from_file(tmp_path / "absent.yaml")


# ---------------------------------------------------------------------------
# RenderPlan / RenderReport
# ---------------------------------------------------------------------------


class TestRenderPlan:
    @pytest.mark.unit
    def test_duplicate_file_paths_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            RenderPlan(files=(FileEntry("a.txt", "1"), FileEntry("a.txt", "2")))

    @pytest.mark.unit
    @pytest.mark.parametrize("path", ["/etc/passwd", "../escape", "a/../../b", ""])
    def test_non_relative_paths_rejected(self, path):
        with pytest.raises(ValidationError):
            FileEntry(path, "x")

    @pytest.mark.unit
    def test_lookup_and_paths(self):
        plan = RenderPlan(directories=("src/main/java",), files=(FileEntry("build.gradle", "x"),))
        assert plan.file("build.gradle").content == "x"
        assert plan.file("missing") is None
        assert plan.paths() == ["src/main/java", "build.gradle"]

    @pytest.mark.unit
    def test_equal_plans_compare_equal(self):
        a = RenderPlan(directories=("d",), files=(FileEntry("f", "c"),))
        b = RenderPlan(directories=("d",), files=(FileEntry("f", "c"),))
        assert a == b


class TestRenderReport:
    @pytest.mark.unit
    def test_missing_reports_wrong_types(self, tmp_path: Path):
        (tmp_path / "dir").mkdir()
        (tmp_path / "file.txt").write_text("x")
        report = RenderReport(
            root=tmp_path,
            directories=[tmp_path / "dir", tmp_path / "file.txt"],
            files=[tmp_path / "file.txt", tmp_path / "dir", tmp_path / "gone.txt"],
        )
        assert report.missing() == [
            tmp_path / "file.txt", tmp_path / "dir", tmp_path / "gone.txt",
        ]
