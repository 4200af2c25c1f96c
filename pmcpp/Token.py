TEXT = 'text'
NAME = 'name'

class Token:
  def __init__(self, terminal_str, source_string, name=None):
    self.__dict__.update(locals())

  def getString(self):
    return self.source_string

  def getTerminalStr(self):
    return self.terminal_str

  # the macro name a candidate token refers to, None for plain text
  def getName(self):
    return self.name

  def isCandidate(self):
    return self.terminal_str == NAME and bool(self.name)
