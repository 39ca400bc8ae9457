"""Roster server entrypoint.

Run directly (`python3 roster.py --data-dir data`) or through uvicorn
(`uvicorn roster:app`). Setup-only flags (`--setup`, `--print-template`,
`--help`) exit before the app is built.
"""
import sys

from roster_lib.main import create_app, Config
from roster_lib.setup import parse_args, setup

_args = parse_args(sys.argv[1:])
_rc = setup(sys.argv[1:])
if _rc is not None:
    sys.exit(_rc)

app = create_app(Config(
    data_dir=_args.data_dir,
    storage_backend='memory' if _args.memory else 'file',
))

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=_args.host, port=_args.port)
