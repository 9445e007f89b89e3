# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions.integration
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

'''
``pyramid_actions.integration`` offers the pyramid-specific way of
attaching controller actions to routes.
'''

import inspect
from pyramid.exceptions import ConfigurationError
from .dispatcher import action as makeAction, DEFAULT_STATUS

SETTING_STATUS = 'pyramid_actions.error_status'

#------------------------------------------------------------------------------
def ownerName(dotted):
  '''
  Returns the dotted name of the object that contains the object named
  `dotted`, in the same style (``pkg.mod.Class.method`` or
  ``pkg.mod:Class.method``), or ``None`` if there is none.
  '''
  if ':' in dotted:
    module, attr = dotted.split(':', 1)
    if '.' not in attr:
      return None
    return module + ':' + attr.rsplit('.', 1)[0]
  if '.' not in dotted:
    return None
  return dotted.rsplit('.', 1)[0] or None

#------------------------------------------------------------------------------
def getStatus(config):
  settings = config.get_settings() or {}
  value = settings.get(SETTING_STATUS, DEFAULT_STATUS)
  try:
    return int(value)
  except (TypeError, ValueError):
    raise ConfigurationError(
      'invalid "%s" setting %r: must be an integer HTTP status code'
      % (SETTING_STATUS, value))

#------------------------------------------------------------------------------
def add_action(self, route_name, pattern, action, controller=None, status=None, **kw):
  '''

  :param route_name:

    [required] The name of the route that is created for `action`.

  :param pattern:

    [required] The URL pattern of the route, passed unchanged to
    `config.add_route()`.

  :param action:

    [required] Either a dotted-string or a controller method, e.g.
    ``MyController.index``. See :func:`pyramid_actions.action`.

  :param controller:

    [optional] Either a dotted-string or the controller class to
    instantiate for each request. This must be specified when `action`
    is a method that the controller inherits, e.g. for::

      class AuthedController(BaseController):
        def init(self, response, request): ...

    ``config.add_action('home', '/', AuthedController.index)`` would
    instantiate ``BaseController`` (the class that defines ``index``)
    and needs ``controller=AuthedController``. If `action` is a dotted
    string, the class named in it is used, so
    ``'mypackage.AuthedController.index'`` does not need it.

  :param status:

    [optional] The HTTP status used to report failures. Defaults to
    the ``pyramid_actions.error_status`` setting, or 500.

  Any additional keyword parameters will be passed through to the
  `config.add_route()` call.

  '''
  if controller is None and isinstance(action, str):
    owner = ownerName(action)
    if owner is not None:
      owner = self.maybe_dotted(owner)
      if inspect.isclass(owner):
        controller = owner
  action     = self.maybe_dotted(action)
  controller = self.maybe_dotted(controller)
  if status is None:
    status = getStatus(self)
  # malformed actions must fail before the route is added
  view = makeAction(action, controller=controller, status=status)
  self.add_route(route_name, pattern=pattern, **kw)
  self.add_view(view=view, route_name=route_name)

#------------------------------------------------------------------------------
def includeme(config):
  config.add_directive('add_action', add_action)

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
