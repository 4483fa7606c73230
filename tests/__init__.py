"""
Only the root tests directory carries an __init__.py; test subdirectories are
plain directories (PEP 420 namespace packages) so that pytest discovers them
without extra package files.
"""
