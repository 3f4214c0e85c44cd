import importlib.util


class RuntimeInfo:
    """Optional-dependency checks that never import the module itself."""

    @classmethod
    def has_module(cls, module_name: str) -> bool:
        try:
            return importlib.util.find_spec(module_name) is not None
        except (ImportError, ValueError):
            return False

    @classmethod
    def has_hidapi(cls) -> bool:
        # hidapi installs as the top-level "hid" module
        return cls.has_module("hid")
