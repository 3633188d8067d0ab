"""Constants shared by the project file sets."""

MAIN = "src/main.ts"
GITIGNORE = ".gitignore"
GENDIR = ".devicescript"
LIBDIR = f"{GENDIR}/lib"
IMPORT_PREFIX = 'import * as ds from "@devicescript/core"'

DEFAULT_SPACES = 4

GITIGNORE_TOKENS = ("node_modules", GENDIR)

# Service identifiers are 28 random bits with the top nibble set to 1
SERVICE_ID_RANDOM_MASK = 0x0FFF_FFFF
SERVICE_ID_PREFIX = 0x1000_0000

DOCS_URL = "https://microsoft.github.io/devicescript/"
