from fakestore_mcp.server.mcp_server import main

main()
