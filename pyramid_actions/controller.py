# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions.controller
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

'''
Provides the lifecycle interface for request-scoped controllers in
pyramid_actions, and a default implementation of it. A controller
instance is constructed for every request that is dispatched to one
of its actions, and therefore can safely keep request-specific data
as plain instance attributes. The base class provides the following
attributes:

* ``Controller().request``::

  The :class:`pyramid.request.Request` currently being handled. It is
  ``None`` until :meth:`Controller.init` has been called.

* ``Controller().response``::

  The response object that the action writes to (normally
  ``request.response``). It is ``None`` until :meth:`Controller.init`
  has been called.
'''

from typing import Optional, Protocol, runtime_checkable

#------------------------------------------------------------------------------
def writeError(response, code, message):
  '''
  Replaces the body of `response` with `message` as plain text and
  sets its status to `code`.
  '''
  response.status_int   = code
  response.content_type = 'text/plain'
  response.charset      = 'utf-8'
  response.headers['X-Content-Type-Options'] = 'nosniff'
  response.text = message + '\n'

#------------------------------------------------------------------------------
@runtime_checkable
class IController(Protocol):
  '''
  The lifecycle methods that every controller must provide in order
  to be usable with :func:`pyramid_actions.action`. Any class that
  implements these three methods satisfies the interface; subclassing
  :class:`Controller` is the easiest way to do so.
  '''

  def init(self, response, request) -> Optional[Exception]:
    '''
    Initializes the controller for the current request. If an
    exception is returned (or raised), then :meth:`error` is invoked
    and the action is skipped.
    '''

  def destroy(self) -> None:
    '''
    Called after the action (or the error report) has completed,
    regardless of the outcome. Useful for cleaning up anything that
    was set up in :meth:`init`.
    '''

  def error(self, code: int, message: str) -> None:
    '''
    Reports an error to the client. Called when :meth:`init` or the
    action fail, and can also be called directly by actions for
    consistent error handling across a controller.
    '''

#------------------------------------------------------------------------------
class Controller(object):
  '''
  The base implementation of :class:`IController`. It is meant to be
  subclassed by concrete controllers, which add action methods and
  may override any of the lifecycle methods. For example::

    class HelloController(Controller):
      def index(self) -> Optional[Exception]:
        self.write('Hello World')
        return None

  Subclasses that override :meth:`init` should remember to call
  ``super().init(response, request)`` before using ``self.response``.
  '''

  def __init__(self):
    self.request  = None
    self.response = None

  #----------------------------------------------------------------------------
  def init(self, response, request) -> Optional[Exception]:
    self.request, self.response = request, response
    return None

  #----------------------------------------------------------------------------
  def destroy(self) -> None:
    pass

  #----------------------------------------------------------------------------
  def error(self, code: int, message: str) -> None:
    '''
    Replaces the current response with a plain-text error response
    with status `code` and `message` as the body.
    '''
    writeError(self.response, code, message)

  #----------------------------------------------------------------------------
  def write(self, data) -> None:
    '''
    Appends `data` (either ``str`` or ``bytes``) to the response body.
    '''
    self.response.write(data)

#------------------------------------------------------------------------------
# end of $Id$
# $ChangeLog$
#------------------------------------------------------------------------------
