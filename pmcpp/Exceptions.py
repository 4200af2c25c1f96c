class PreProcessorError(Exception):
  def __init__(self, message, resource=None, lineno=None, line=None):
    super().__init__(message)
    self.message = message
    self.resource = resource
    self.lineno = lineno
    self.line = line

  def locate(self, resource, lineno, line):
    # only the first location sticks, the one closest to the fault
    if self.resource is None:
      self.resource = resource
      self.lineno = lineno
      self.line = line
    return self

  def toString(self, program='pmcpp'):
    lines = []
    if self.resource is not None:
      if self.lineno:
        line = (self.line or '').rstrip('\n')
        lines.append('%s: %s[%d]: %s' % (program, self.resource, self.lineno, line))
      else:
        lines.append('%s: %s:' % (program, self.resource))
    lines.append('%s: Error: %s' % (program, self.message))
    return '\n'.join(lines)

  def __str__(self):
    return self.message

class MissingNameError(PreProcessorError): pass
class IllegalCharError(PreProcessorError): pass
class UnterminatedValueError(PreProcessorError): pass
class TrailingTextError(PreProcessorError): pass
class RedefinitionError(PreProcessorError): pass
class UnmatchedConditionalError(PreProcessorError): pass
class NestedConditionalError(PreProcessorError): pass
class UnrecognizedDirectiveError(PreProcessorError): pass
class MalformedIncludeError(PreProcessorError): pass
class TooDeepError(PreProcessorError): pass
class NotFoundError(PreProcessorError): pass
class UnterminatedCommentError(PreProcessorError): pass
class UnterminatedConditionalError(PreProcessorError): pass
class CannotOpenError(PreProcessorError): pass
