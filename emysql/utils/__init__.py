from emysql.utils import formatting, logging, module_loader

__all__ = ("formatting", "logging", "module_loader")
