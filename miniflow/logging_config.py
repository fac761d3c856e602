import logging
import sys

'''
Scripts call setup_logging once; the library itself only ever asks for
module loggers under the 'miniflow' namespace.
'''

FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def setup_logging(level=logging.INFO, log_file=None):
    '''
    Sends 'miniflow' records to stdout, and to log_file when given. Calling it
    again replaces the handlers instead of stacking more of them.
    '''
    logger = logging.getLogger('miniflow')
    logger.setLevel(level)
    # records stop here, so a configured root logger does not print them twice
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
