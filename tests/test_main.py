"""
Tests for the __main__.py entry point module
"""
import sys
import subprocess


def test_main_module_execution():
    """Test that the module can be executed via python -m"""
    result = subprocess.run(
        [sys.executable, '-m', 'vermouth', '--help'],
        capture_output=True,
        text=True,
        timeout=30
    )

    assert result.returncode == 0
    assert 'usage:' in result.stdout.lower()


def test_main_module_import():
    """Test that __main__ can be imported"""
    import vermouth.__main__ as main_module
    assert hasattr(main_module, 'main')
