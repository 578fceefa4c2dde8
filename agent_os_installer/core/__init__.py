"""
Core installation engine.

The `Installer` walks the manifest group by group and file by file, asking the
overwrite resolver what to do with every file that already exists.
"""
