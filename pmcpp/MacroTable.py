import re

from pmcpp.Exceptions import RedefinitionError

nameRegex = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

class Active:
  def __init__(self, value):
    self.value = value
  def __repr__(self):
    return 'Active(%r)' % (self.value)

class Deleted:
  def __repr__(self):
    return 'Deleted()'

class MacroEntry:
  def __init__(self, name, state):
    self.__dict__.update(locals())

  def isActive(self):
    return isinstance(self.state, Active)

  def __repr__(self):
    return '<MacroEntry %s %r>' % (self.name, self.state)

# Append-only table.  #undef marks an entry Deleted rather than removing it,
# lookups scan oldest to newest and skip Deleted entries.
class MacroTable:
  def __init__(self):
    self.entries = []

  def find(self, name):
    for entry in self.entries:
      if entry.isActive() and entry.name == name:
        return entry
    return None

  def define(self, name, value=''):
    if self.find(name) is not None:
      raise RedefinitionError('Macro redefinition')
    entry = MacroEntry(name, Active(value))
    self.entries.append(entry)
    return entry

  def undef(self, name):
    entry = self.find(name)
    if entry is not None:
      entry.state = Deleted()
    return entry

  def lookup(self, name):
    entry = self.find(name)
    if entry is None:
      return None
    return entry.state.value

  def isDefined(self, name):
    return self.find(name) is not None

  def __iter__(self):
    return iter(self.entries)

  def __len__(self):
    return len(self.entries)
