# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions.dispatcher
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

'''
``pyramid_actions.dispatcher`` turns controller methods into pyramid
view callables. The method is validated once, when :func:`action` is
called, and every request that the returned view handles gets its own
controller instance.
'''

import inspect, logging
from pyramid.exceptions import ConfigurationError
from pyramid.httpexceptions import HTTPException
from .controller import IController, writeError
from .util import getHints, getOwner, stripOptional, isErrorType, isconstructible, NoneType

log = logging.getLogger(__name__)

DEFAULT_STATUS = 500

_missing = object()

#------------------------------------------------------------------------------
class RegistrationError(ConfigurationError):
  '''
  Raised by :func:`action` when the given method does not have the
  shape of a controller action.
  '''
class NotCallable(RegistrationError): pass
class ArityMismatch(RegistrationError): pass
class InvalidReturnType(RegistrationError): pass
class ContractNotSatisfied(RegistrationError): pass

#------------------------------------------------------------------------------
class ControllerError(Exception):
  '''
  Describes the failure of a single request: `cause` is the exception
  (or other non-None value) produced by the controller and `code` is
  the HTTP status that will be reported for it.
  '''
  def __init__(self, cause, code):
    super(ControllerError, self).__init__(str(cause))
    self.cause = cause
    self.code  = code
  @property
  def message(self):
    return self.args[0]

class InitializationError(ControllerError): pass
class ActionError(ControllerError): pass

#------------------------------------------------------------------------------
def describe(action):
  return getattr(action, '__qualname__', None) or repr(action)

#------------------------------------------------------------------------------
def controllerType(action, controller=None):
  '''
  Checks that `action` can be used as a controller action, and returns
  the controller class that must be instantiated to invoke it. A valid
  action is a function that takes exactly one positional parameter
  (the controller) and is annotated to return an exception or
  ``None``, e.g.::

    class MyController(Controller):
      def index(self) -> Optional[Exception]:
        ...

  The controller class is taken from `controller` if specified, then
  from the parameter's annotation, and otherwise from the class that
  the function was defined in. It must implement
  :class:`pyramid_actions.IController` and be constructible without
  arguments.

  Raises a subclass of :class:`RegistrationError` if `action` is not
  valid.
  '''

  if not callable(action) or inspect.isclass(action):
    raise NotCallable('action %r is not a function' % (action,))

  try:
    sig = inspect.signature(action)
  except (TypeError, ValueError):
    raise NotCallable('action %r does not have an inspectable signature' % (action,))

  name   = describe(action)
  params = list(sig.parameters.values())
  if len(params) != 1:
    raise ArityMismatch(
      'wrong number of arguments in action %s: expected 1, got %d'
      % (name, len(params)))
  if params[0].kind not in (params[0].POSITIONAL_ONLY, params[0].POSITIONAL_OR_KEYWORD):
    raise ArityMismatch(
      'action %s must take the controller as a positional argument' % (name,))

  hints = getHints(action)
  ret   = hints.get('return', _missing)
  if ret is _missing or ret is None or ret is NoneType:
    raise InvalidReturnType(
      'action %s must be annotated to return an exception or None' % (name,))
  if ret is tuple or getattr(ret, '__origin__', None) is tuple:
    raise ArityMismatch(
      'wrong number of return values in action %s: expected 1' % (name,))
  if not isErrorType(ret):
    raise InvalidReturnType(
      'return type %r of action %s is not an exception type' % (ret, name))

  klass = controller
  if klass is None:
    klass = hints.get(params[0].name)
    if klass is not None:
      klass = stripOptional(klass)
  if klass is None:
    klass = getOwner(action)
  if klass is None:
    raise ContractNotSatisfied(
      'could not determine the controller class of action %s: annotate'
      ' its first parameter or specify the controller explicitly' % (name,))
  if not inspect.isclass(klass) or not issubclass(klass, IController):
    raise ContractNotSatisfied(
      'controller %r of action %s does not implement'
      ' pyramid_actions.IController' % (klass, name))
  if not isconstructible(klass):
    raise ContractNotSatisfied(
      'controller %r of action %s cannot be constructed without arguments'
      % (klass, name))

  return klass

#------------------------------------------------------------------------------
def errorCode(err, default):
  if isinstance(err, HTTPException):
    return err.code
  return default

#------------------------------------------------------------------------------
def run(instance, method, response, request, status):
  '''
  Initializes `instance` and invokes `method` on it. Returns ``None``
  on success, or the :class:`ControllerError` describing which step
  failed and why.
  '''
  try:
    err = instance.init(response, request)
  except Exception as exc:
    log.exception('initialization of %r failed', instance)
    err = exc
  if err is not None:
    return InitializationError(err, errorCode(err, status))
  try:
    err = method(instance)
  except Exception as exc:
    log.exception('action %s failed', describe(method))
    err = exc
  if err is not None:
    return ActionError(err, errorCode(err, status))
  return None

#------------------------------------------------------------------------------
def report(instance, failure, response):
  '''
  Reports `failure` through the controller's ``error`` method. If that
  fails too (e.g. ``init`` failed before storing the response), the
  plain-text error is written to `response` directly, and `response`
  is returned. Otherwise returns ``None``.
  '''
  try:
    instance.error(failure.code, failure.message)
  except Exception:
    log.exception('error report of %r failed', instance)
    writeError(response, failure.code, failure.message)
    return response
  return None

#------------------------------------------------------------------------------
def action(method, controller=None, status=DEFAULT_STATUS):
  '''
  Translates the controller method `method` into a pyramid view
  callable which, when called:

  1. Constructs a new controller instance
  2. Initializes it via :meth:`IController.init`
  3. Invokes `method` on it (unless initialization failed)
  4. Calls :meth:`IController.error` if either of the above failed
  5. Calls :meth:`IController.destroy`

  This allows common per-request logic to be cleanly reused while no
  data is shared between requests. Any exception returned or raised
  by `init` or by `method` is reported with HTTP status `status`
  (default 500), except for pyramid HTTP exceptions, which are
  reported with their own status code. Example::

    config.add_view(action(MyController.index), route_name='home')

  See :func:`controllerType` for what constitutes a valid `method`
  and how `controller` is used. Raises :class:`RegistrationError` if
  `method` is not valid.
  '''
  klass = controllerType(method, controller)
  log.debug('registered action %s on controller %s', describe(method), klass.__name__)

  def handler(request):
    response = request.response
    instance = klass()
    written  = None
    try:
      failure = run(instance, method, response, request, status)
      if failure is not None:
        log.debug('%s in %s: %d %s',
                  failure.__class__.__name__, describe(method), failure.code, failure.message)
        written = report(instance, failure, response)
    finally:
      try:
        instance.destroy()
      except Exception:
        log.exception('destroying %r failed', instance)
    if written is not None:
      return written
    current = getattr(instance, 'response', None)
    if current is not None:
      return current
    return response

  handler.__name__   = getattr(method, '__name__', 'handler')
  handler.__module__ = getattr(method, '__module__', __name__)
  handler.__doc__    = getattr(method, '__doc__', None)
  handler.action     = method
  handler.controller = klass
  return handler

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
