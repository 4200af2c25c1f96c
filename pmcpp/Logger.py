import sys, logging

from xtermcolor.ColorMap import XTermColorMap

class Factory:
  def initialize(self, debug, stream=None):
    logger = logging.getLogger('pmcpp')
    for handler in list(logger.handlers):
      logger.removeHandler(handler)
    logger.propagate = False
    if not debug:
      logger.setLevel(logging.WARNING)
      logger.addHandler(logging.NullHandler())
      return logger
    if stream is None:
      stream = sys.stdout
    logger.setLevel(logging.DEBUG)
    stdoutLogger = logging.StreamHandler(stream)
    stdoutLogger.setLevel(logging.DEBUG)
    tag = '<<'
    if hasattr(stream, 'isatty') and stream.isatty():
      tag = XTermColorMap().colorize(tag, 0x00ff00)
    formatter = logging.Formatter(tag + '%(message)s')
    stdoutLogger.setFormatter(formatter)
    logger.addHandler(stdoutLogger)
    return logger
  def getProgramLogger(self):
    return logging.getLogger('pmcpp')
  def getModuleLogger(self, module):
    return logging.getLogger('%s' % (module))
