"""
Only the root tests directory carries an __init__.py; subdirectories work as
namespace packages (PEP 420). Test module names must therefore stay unique.
"""
