import os, stat

from pmcpp.SourceCode import SourceFile, ENCODING, NEWLINE
from pmcpp.Exceptions import TooDeepError, NotFoundError
from pmcpp.Config import getConfig

# one top level file plus four levels of include
MAXLEVEL = 5

# Open fname for reading, accepting only regular files
def openFile(fname):
  try:
    fp = open(fname, encoding=ENCODING, newline=NEWLINE)
  except (OSError, ValueError):
    return None
  try:
    if not stat.S_ISREG(os.fstat(fp.fileno()).st_mode):
      fp.close()
      return None
  except OSError:
    fp.close()
    return None
  return fp

class IncludePath:
  # topLevel is the path named on the command line, None for standard input
  def __init__(self, topLevel=None, varDir=None):
    self.directories = []
    if topLevel is not None:
      self.directories.append(os.path.dirname(topLevel) or '.')
    if varDir is None:
      varDir = getConfig('PCP_VAR_DIR')
    self.directories.append(os.path.join(varDir, 'pmns'))

  def candidates(self, fname):
    yield fname
    for directory in self.directories:
      yield os.path.join(directory, fname)

  def resolve(self, fname):
    for path in self.candidates(fname):
      fp = openFile(path)
      if fp is not None:
        return (path, fp)
    return (None, None)

class IncludeStack:
  def __init__(self, includePath, maxDepth=MAXLEVEL):
    self.__dict__.update(locals())
    self.frames = []

  @property
  def current(self):
    return self.frames[-1] if self.frames else None

  @property
  def depth(self):
    return len(self.frames)

  def push(self, frame):
    if len(self.frames) >= self.maxDepth:
      raise TooDeepError('include nesting too deep')
    self.frames.append(frame)
    return frame

  def pushInclude(self, fname, ctl='#'):
    if len(self.frames) >= self.maxDepth:
      raise TooDeepError('%cinclude nesting too deep' % (ctl))
    (path, fp) = self.includePath.resolve(fname)
    if fp is None:
      raise NotFoundError('Cannot open file for %cinclude' % (ctl))
    return self.push(SourceFile(path, fp))

  def pop(self):
    frame = self.frames.pop()
    frame.close()
    return frame

  # Returns (line, resumed).  At end of file the frame is closed and popped;
  # resumed is True when an outer frame takes over, and (None, False) means
  # the top level file is exhausted.
  def readLine(self):
    if not self.frames:
      return (None, False)
    line = self.frames[-1].readLine()
    if line is not None:
      return (line, False)
    self.pop()
    return (None, len(self.frames) > 0)

  def close(self):
    while self.frames:
      self.pop()
