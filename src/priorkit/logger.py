"""Contains the name for the logger of priorkit modules.

``priorkit`` logs through the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Reading and writing prior streams, attaching and clearing priors.
* ``WARNING``: Something unexpected happened while loading a stream, e.g. a
    distribution block written by a different format version.

Evaluation of log-densities and gradients never logs.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``priorkit.logger.priorkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "priorkit"
priorkit_logger = logging.getLogger(logger_name)
