"""
Only the root tests directory carries an __init__.py; test subdirectories are plain
directories (PEP 420), so every test module needs a unique file name.
"""
