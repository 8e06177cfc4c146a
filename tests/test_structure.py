"""
Structure lint tests.
Verify that the component layout exists and follows conventions.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = PROJECT_ROOT / "themekit"

TOKEN_COMPONENTS = ["palette", "breakpoints", "spacing", "shape", "component_tokens"]


class TestProjectStructure:
    """Verify project structure follows component conventions."""

    def test_package_directories_exist(self) -> None:
        assert (PACKAGE_ROOT / "components").is_dir()
        assert (PACKAGE_ROOT / "adapters").is_dir()
        assert (PACKAGE_ROOT / "config").is_dir()

    def test_token_components_have_models_and_component(self) -> None:
        """Every token component splits models from its entry point."""
        for name in TOKEN_COMPONENTS:
            component_dir = PACKAGE_ROOT / "components" / name
            assert (component_dir / "models.py").is_file(), f"Missing models.py in {name}"
            assert (component_dir / "component.py").is_file(), f"Missing component.py in {name}"

    def test_theme_component_defines_ports(self) -> None:
        theme_dir = PACKAGE_ROOT / "components" / "theme"
        assert (theme_dir / "ports.py").is_file()
        assert (theme_dir / "component.py").is_file()
        assert (theme_dir / "models.py").is_file()

    def test_init_files_present(self) -> None:
        """Python packages must have __init__.py files."""
        packages = [
            "themekit",
            "themekit/adapters",
            "themekit/config",
            "themekit/components",
            "themekit/components/theme",
            *[f"themekit/components/{name}" for name in TOKEN_COMPONENTS],
        ]
        for pkg in packages:
            init_file = PROJECT_ROOT / pkg / "__init__.py"
            assert init_file.is_file(), f"Missing __init__.py in {pkg}"

    def test_tests_structure_exists(self) -> None:
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
