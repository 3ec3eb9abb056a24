"""Short identifier names for obfuscation renaming passes.

The package turns sequence positions into the shortest unused names over a
configurable symbol alphabet.  The renaming engine that decides which
identifiers receive those names lives elsewhere; see :mod:`obfuscator.naming`
for the generator itself and :mod:`obfuscator.cli` for the command line.
"""

from .naming import NameFactory, NameMode, NamingSession

__version__ = "0.1.0"

__all__ = ["NameFactory", "NameMode", "NamingSession", "__version__"]
