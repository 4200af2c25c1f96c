import os

from pmcpp.Logger import Factory as LoggerFactory

moduleLogger = LoggerFactory().getModuleLogger(__name__)

defaults = {
  'PCP_VAR_DIR': '/var/lib/pcp'
}

def getConfigFile():
  return os.environ.get('PCP_CONF', '/etc/pcp.conf')

# pcp.conf is a list of shell style KEY=value assignments
def readConfigFile(path):
  config = dict()
  try:
    fp = open(path)
  except OSError as error:
    moduleLogger.debug('cannot read %s: %s' % (path, error.strerror))
    return config
  with fp:
    for line in fp:
      line = line.strip()
      if not line or line[0] == '#' or '=' not in line:
        continue
      (key, value) = line.split('=', 1)
      value = value.strip()
      if len(value) >= 2 and value[0] == value[-1] and value[0] in '\'"':
        value = value[1:-1]
      config[key.strip()] = value
  return config

def getConfig(name, default=None):
  if name in os.environ:
    return os.environ[name]
  config = readConfigFile(getConfigFile())
  if name in config:
    return config[name]
  if default is None:
    default = defaults.get(name, '')
  return default
