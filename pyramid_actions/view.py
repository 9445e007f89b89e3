# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions.view
# desc: a controller that renders templates with a per-request view model.
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

from typing import Optional
from pyramid.renderers import render
from .controller import Controller

#------------------------------------------------------------------------------
class ViewController(Controller):
  '''
  A :class:`pyramid_actions.Controller` that collects template values
  in ``self.view`` and renders them with any renderer registered with
  the application's configurator. For example::

    class PageController(ViewController):
      def show(self) -> Optional[Exception]:
        self.view['title'] = 'Welcome'
        self.html(200, 'mypackage:templates/page.pt')
        return None
  '''

  def __init__(self):
    super(ViewController, self).__init__()
    self.view = None

  #----------------------------------------------------------------------------
  def init(self, response, request) -> Optional[Exception]:
    self.view = dict()
    return super(ViewController, self).init(response, request)

  #----------------------------------------------------------------------------
  def html(self, code, name, contentType='text/html'):
    '''
    Renders the renderer (template) `name` with ``self.view`` and
    makes the result the response body, with status `code`.
    '''
    result = render(name, self.view, request=self.request)
    res = self.response
    res.status_int   = code
    res.content_type = contentType
    if isinstance(result, bytes):
      res.body = result
    else:
      res.charset = res.charset or 'utf-8'
      res.text = result

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
