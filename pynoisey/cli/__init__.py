"""
Command Line Interface for PyNoisey

Command line utilities working on JSON noise graph configurations.

Available Commands:
- graph_check (pny-check): build a configuration and report what it contains
- graph_sample (pny-sample): print one generator's value at a coordinate
"""

_CLI_SUBMODULES = {
    "graph_check": (".graph_commands", "graph_check"),
    "graph_sample": (".graph_commands", "graph_sample"),
    "load_graph": (".graph_commands", "load_graph"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
