# distutils.util.strtobool is gone since python 3.12, environment flags use this instead

_TRUE_VALUES = {'y', 'yes', 't', 'true', 'on', '1'}
_FALSE_VALUES = {'n', 'no', 'f', 'false', 'off', '0'}


def strtobool(value):
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError('"{}" is not a valid bool value'.format(value))
