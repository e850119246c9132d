from tqdm import tqdm
import logging

log = logging.getLogger(__name__)


class RuntimeConfiguration(object):
    """
    Global runtime configuration. Allows for the dynamic configuration of existing
    primitives and tooling.
    """

    def __init__(self, show_progress: bool=False):
        self.show_progress = show_progress
        self.default_short_printer = lambda obj: f'<{obj.__class__.__name__}>'


    def __repr__(self):
        return f"<RuntimeConfiguration: show_progress={self.show_progress}>"


    def __str__(self):
        return self.__repr__()


    def report_progress(self, iterable=None, **kwargs):
        """
        Wraps `iterable` in a progress bar if `show_progress` is enabled.

        Parameters:
            iterable (iterable): Iterable to wrap.
            **kwargs           : Keyword arguments passed to `tqdm`.

        Returns:
            iterable: Wrapped or original iterable.
        """
        if self.show_progress:
            return tqdm(iterable, **kwargs)

        return iterable


    def set_log_level(self, level: int):
        """
        Sets the level of the `arx` package logger.

        Parameters:
            level (int): Logging level (e.g. `logging.DEBUG`).
        """
        logging.getLogger('arx').setLevel(level)
        log.debug(f"Log level set to {logging.getLevelName(level)}")



RUNTIME = RuntimeConfiguration()
