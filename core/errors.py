"""Exception types raised by the server.

Remote and transport failures are not wrapped here: they surface as the
`httpx.HTTPError` family and are classified in `utils.response_utils.handle_error`.
"""


class ConfigError(Exception):
    """Startup configuration is missing or invalid."""


class ToolInputError(ValueError):
    """Tool arguments do not match the declared input schema."""


class UnknownToolError(LookupError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class DuplicateToolError(ValueError):
    def __init__(self, name: str, module_name: str):
        super().__init__(f"Tool {name} from {module_name} is already registered")
        self.name = name
        self.module_name = module_name
