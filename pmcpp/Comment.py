from pmcpp.Exceptions import UnterminatedCommentError

# the C locale's isspace() set
whitespace = ' \t\n\r\f\v'

# Blank out /* ... */ comments, which may span lines.  inComment is 0 when
# outside a comment, else the number of the line on which it was opened.
# Comment bytes become spaces so the remaining columns do not move, then
# trailing whitespace is trimmed and a single newline restored.
def stripComments(line, inComment, lineno):
  chars = list(line)
  i = 0
  n = len(chars)
  while i < n:
    if inComment:
      if chars[i] == '*' and i + 1 < n and chars[i+1] == '/':
        inComment = 0
        chars[i] = chars[i+1] = ' '
        i += 1
      else:
        chars[i] = ' '
    elif chars[i] == '/' and i + 1 < n and chars[i+1] == '*':
      inComment = lineno
      chars[i] = chars[i+1] = ' '
      i += 1
    i += 1
  return (''.join(chars).rstrip(whitespace) + '\n', inComment)

def checkClosed(inComment, resource):
  if inComment:
    raise UnterminatedCommentError('Comment at line %d not terminated before end of file' % (inComment), resource, 0)
