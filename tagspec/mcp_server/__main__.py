from tagspec import config
from tagspec.mcp_server import mcp

# stdio transport owns stdout; keep trace lines off it.
config.RUNTIME_QUIET = True
mcp.run()
