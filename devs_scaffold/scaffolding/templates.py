"""Template file sets for project scaffolding."""

from devs_scaffold.core.file_set import FileSet, document, patch, text
from devs_scaffold.scaffolding.config import DOCS_URL, IMPORT_PREFIX, LIBDIR, MAIN


def get_main_template() -> str:
    """Generate the default DeviceScript entry point."""
    return f"""{IMPORT_PREFIX}

ds.everyMs(1000, () => {{
    console.log(":)")
}})"""


def get_readme_template() -> str:
    """Generate README.md template.

    Returns:
        Complete README.md content as string
    """
    return f"""# - project name -

This project uses [DeviceScript]({DOCS_URL}).

## Project structures

```
.devicescript      reserved folder for devicescript generated files
src/main.ts        default DeviceScript entry point
...
/sim/app.ts        default node simulation entry point
/sim/...
/services/...      custom service definitions
/boards/...        custom board definitions
```


## Local/container development

-  install node.js 16+

```bash
nvm install 18
nvm use 18
```

-  install dependencies

```bash
yarn install
```

### Using Visual Studio Code

- open the project folder in code

```bash
code .
```

- install the [DeviceScript extension]({DOCS_URL}getting-started/vscode)

- start debugging!

### Using the command line

- start the watch build and developer tools server

```bash
yarn watch
```

-  navigate to devtools page (see terminal output)
to use the simulators or deploy to hardware.

-  open `src/main.ts` in your favorite TypeScript IDE and start editing.

"""


def get_services_readme_template() -> str:
    """Generate services/README.md template."""
    return f"""# Services

Add custom service definition in this folder.

-   [Read documentation]({DOCS_URL}developer/custom-services)
"""


def get_service_spec_template(name: str, identifier: int) -> str:
    """Generate a sensor service specification stub.

    Args:
        name: Human readable service name (e.g., 'Light Level')
        identifier: Service class identifier

    Returns:
        Markdown service specification
    """
    return f"""# {name}

    identifier: 0x{identifier:x}
    extends: _sensor

Measures {name}.

## Registers

    ro level: u0.16 / @ reading

A measure of {name}.
"""


def get_sim_runtime_template() -> str:
    """Generate sim/runtime.ts, the Jacdac bus bridge for node simulators."""
    return """import "websocket-polyfill"
import { Blob } from "buffer"
globalThis.Blob = Blob as any
import customServices from "../.devicescript/services.json"
import { createWebSocketBus } from "jacdac-ts"

/**
 * A Jacdac bus that will connect to the devicescript local server.
 *
 * ```example
 * import { bus } from "./runtime"
 * ```
 */
export const bus = createWebSocketBus({
    busOptions: {
        services: customServices as jdspec.ServiceSpec[],
    },
})
"""


def get_sim_readme_template() -> str:
    """Generate sim/README.md template."""
    return """# Simulators (node.js)

This folder contains a Node.JS/TypeScript application that will be executed side-by-side with
the DeviceScript debugger and simulators. The application uses the [Jacdac TypeScript package](https://microsoft.github.io/jacdac-docs/clients/javascript/)
to communicate with DeviceScript.

The default entry point file is `app.ts`, which uses the Jacdac bus from `runtime.ts` to communicate
with the rest of the DeviceScript execution.

Feel free to modify to your needs and taste.
"""


def project_files() -> FileSet:
    """Files written by project initialization (all create-if-absent)."""
    return {
        "src/tsconfig.json": document({
            "compilerOptions": {
                "moduleResolution": "node",
                "target": "es2022",
                "module": "es2022",
                "lib": [],
                "strict": True,
                "strictNullChecks": False,
                "strictFunctionTypes": True,
                "sourceMap": False,
                "declaration": False,
                "experimentalDecorators": True,
                "preserveConstEnums": True,
                "noImplicitThis": True,
                "isolatedModules": True,
                "noImplicitAny": True,
                "moduleDetection": "force",
                "types": [],
            },
            "include": ["*.ts", f"../{LIBDIR}/*.ts"],
        }),
        ".prettierrc": document({
            "arrowParens": "avoid",
            "semi": False,
            "tabWidth": 4,
        }),
        ".vscode/extensions.json": document({
            "recommendations": ["esbenp.prettier-vscode"],
        }),
        ".vscode/launch.json": document({
            "version": "0.2.0",
            "configurations": [
                {
                    "name": "DeviceScript",
                    "type": "devicescript",
                    "request": "launch",
                    "program": "${workspaceFolder}/" + MAIN,
                    "deviceId": "${command:deviceScriptSimulator}",
                    "stopOnEntry": False,
                },
            ],
        }),
        "devsconfig.json": document({}),
        "package.json": document({
            "version": "0.0.0",
            "private": True,
            "dependencies": {},
            "devDependencies": {
                "@devicescript/cli": "*",
            },
            "scripts": {
                # generates .devicescript/lib/* files
                "setup": "devicescript build",
                "build:devicescript": "devicescript build",
                "build": "yarn build:devicescript",
                "watch:devicescript": f"devicescript devtools {MAIN}",
                "watch": "yarn watch:devicescript",
                "start": "yarn watch",
            },
        }),
        MAIN: text(get_main_template()),
        "README.md": text(get_readme_template()),
    }


def sim_files() -> FileSet:
    """Files written when adding node.js simulator support.

    ``.vscode/launch.json`` and ``package.json`` are patched into the
    existing project files.
    """
    return {
        ".vscode/launch.json": patch({
            "configurations": [
                {
                    "name": "Sim",
                    "request": "launch",
                    "runtimeArgs": ["-r", "ts-node/register"],
                    "args": ["${workspaceFolder}/sim/app.ts"],
                    "skipFiles": ["<node_internals>/**"],
                    "type": "node",
                    "env": {
                        "TS_NODE_PROJECT": "${workspaceFolder}/sim/tsconfig.json",
                    },
                },
            ],
            "compounds": [
                {
                    "name": "DeviceScript+Sim",
                    "configurations": ["DeviceScript", "Sim"],
                    "stopAll": True,
                },
            ],
        }),
        "package.json": patch({
            "devDependencies": {
                "nodemon": "^2.0.20",
                "typescript": "^4.9.5",
                "ts-node": "^10.9.1",
            },
            "scripts": {
                "build:sim": "cd sim && tsc --outDir ../.devicescript/sim",
                "build": "yarn build:devicescript && yarn build:sim",
                "watch:sim": (
                    "cd sim && nodemon --watch './**' --ext 'ts,json' "
                    + "--exec 'ts-node ./app.ts --project ./tsconfig.json'"
                ),
                "watch": "yarn watch:devicescript & yarn watch:sim",
            },
        }),
        "sim/runtime.ts": text(get_sim_runtime_template()),
        "sim/README.md": text(get_sim_readme_template()),
        "sim/app.ts": text('import { bus } from "./runtime"\n\n'),
        "sim/tsconfig.json": document({
            "type": "module",
            "compilerOptions": {
                "lib": ["es2022", "dom"],
                "module": "commonjs",
                "target": "es2022",
                "strict": True,
                "esModuleInterop": True,
                "skipLibCheck": True,
                "forceConsistentCasingInFileNames": True,
                "moduleResolution": "node",
                "resolveJsonModule": True,
            },
            "include": ["./*.ts", "../node_modules/*"],
        }),
    }


def service_files(name: str, service_id: str, identifier: int) -> FileSet:
    """Files written when adding a custom service.

    Args:
        name: Human readable service name
        service_id: File stem for the specification (see ``service_id_for``)
        identifier: Service class identifier
    """
    return {
        f"services/{service_id}.md": text(get_service_spec_template(name, identifier)),
        "services/README.md": text(get_services_readme_template()),
    }
