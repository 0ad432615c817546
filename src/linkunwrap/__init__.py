from .version import __version__ as __version__

__title__ = "linkunwrap"
__description__ = "Unwraps redirector and tracking links to their real destination."
__license__ = "Apache-2.0"
