# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions.util
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

import sys, types, typing, inspect
from importlib import metadata

NoneType = type(None)

#------------------------------------------------------------------------------
def getVersion(package='pyramid_actions', default='unknown'):
  try:
    return metadata.version(package)
  except metadata.PackageNotFoundError:
    return default

#------------------------------------------------------------------------------
def getHints(func):
  '''
  Returns the resolved annotations of `func`. If they cannot be
  resolved (e.g. a forward reference to a class that is not a module
  global), the raw annotations are returned instead.
  '''
  try:
    return typing.get_type_hints(func)
  except (NameError, TypeError):
    return dict(getattr(func, '__annotations__', None) or {})

#------------------------------------------------------------------------------
def isunion(hint):
  origin = typing.get_origin(hint)
  return origin is typing.Union or origin is getattr(types, 'UnionType', None)

#------------------------------------------------------------------------------
def stripOptional(hint):
  '''
  Removes one level of ``Optional[...]`` from `hint`. Unions of more
  than one non-None type are returned unchanged.
  '''
  if not isunion(hint):
    return hint
  args = [arg for arg in typing.get_args(hint) if arg is not NoneType]
  if len(args) == 1:
    return args[0]
  return hint

#------------------------------------------------------------------------------
def isErrorType(hint):
  '''
  Checks whether the annotation `hint` describes an error value, i.e.
  an :class:`Exception` subclass, optionally wrapped in ``Optional``
  or a union of such subclasses.
  '''
  if isunion(hint):
    args = [arg for arg in typing.get_args(hint) if arg is not NoneType]
    return len(args) > 0 and all(isErrorType(arg) for arg in args)
  return inspect.isclass(hint) and issubclass(hint, Exception)

#------------------------------------------------------------------------------
def getOwner(func):
  '''
  Returns the class that `func` was defined in by walking its
  qualified name from its module, or ``None`` if that is not possible
  (e.g. classes defined inside a function body).
  '''
  qualname = getattr(func, '__qualname__', None)
  module   = sys.modules.get(getattr(func, '__module__', None) or '')
  if not qualname or module is None:
    return None
  path = qualname.split('.')[:-1]
  if not path or '<locals>' in path:
    return None
  owner = module
  for name in path:
    owner = getattr(owner, name, None)
    if owner is None:
      return None
  if not inspect.isclass(owner):
    return None
  return owner

#------------------------------------------------------------------------------
def isconstructible(klass):
  try:
    sig = inspect.signature(klass)
  except (TypeError, ValueError):
    # no introspectable signature (e.g. some builtins)
    return True
  try:
    sig.bind()
  except TypeError:
    return False
  return True

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
