import io

# Input is decoded one byte per character so any byte sequence passes
# through unchanged, and lines end only at '\n'.
ENCODING = 'latin-1'
NEWLINE = '\n'

# One frame of the include stack: a named reader and the number of the
# last line read from it (0 before the first read).
class SourceFile:
  def __init__(self, resource, fp, lineno = 0, owned = True):
    self.__dict__.update(locals())
    self.closed = False

  def getResource(self):
    return self.resource

  def getLine(self):
    return self.lineno

  def readLine(self):
    line = self.fp.readline()
    if not line:
      return None
    self.lineno += 1
    return line

  def close(self):
    if self.closed:
      return
    self.closed = True
    if self.owned:
      self.fp.close()

  def __str__(self):
    return '<SourceFile file=%s line=%d>' % (self.resource, self.lineno)

class SourceCodeString(SourceFile):
  def __init__(self, resource, string, lineno = 0):
    super().__init__(resource, io.StringIO(string, newline=NEWLINE), lineno)

# Standard input is borrowed, never closed by the preprocessor
class SourceStream(SourceFile):
  def __init__(self, fp, resource = '<stdin>'):
    super().__init__(resource, fp, 0, False)
