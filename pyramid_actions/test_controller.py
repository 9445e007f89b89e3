# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions.test_controller
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

'''
Unit test the pyramid-actions controller base class.
'''

import unittest
from pyramid import testing
from pyramid.response import Response
from pyramid_actions import IController, Controller, ViewController

#------------------------------------------------------------------------------
class Structural(object):
  def init(self, response, request): return None
  def destroy(self): pass
  def error(self, code, message): pass

class Partial(object):
  def init(self, response, request): return None
  def destroy(self): pass

#------------------------------------------------------------------------------
class TestController(unittest.TestCase):

  def test_base_implements_interface(self):
    'Controller and its subclasses implement IController'
    self.assertTrue(issubclass(Controller, IController))
    self.assertTrue(issubclass(ViewController, IController))

  def test_structural_interface(self):
    'IController is satisfied by any class with init, destroy and error'
    self.assertTrue(issubclass(Structural, IController))
    self.assertFalse(issubclass(Partial, IController))
    self.assertFalse(issubclass(object, IController))

  def test_init_stores_context(self):
    'Controller.init stores the request and response'
    request  = testing.DummyRequest()
    response = Response()
    ctl = Controller()
    self.assertIsNone(ctl.request)
    self.assertIsNone(ctl.response)
    self.assertIsNone(ctl.init(response, request))
    self.assertIs(ctl.request, request)
    self.assertIs(ctl.response, response)
    self.assertIsNone(ctl.destroy())

  def test_write(self):
    'Controller.write appends text and bytes to the response body'
    ctl = Controller()
    ctl.init(Response(), testing.DummyRequest())
    ctl.write('Hello')
    ctl.write(b' World')
    self.assertEqual(ctl.response.body, b'Hello World')

  def test_error(self):
    'Controller.error replaces the response with a plain-text error'
    ctl = Controller()
    ctl.init(Response(), testing.DummyRequest())
    ctl.write('partial output')
    ctl.error(503, 'try again later')
    res = ctl.response
    self.assertEqual(res.status_int, 503)
    self.assertEqual(res.content_type, 'text/plain')
    self.assertEqual(res.charset.lower(), 'utf-8')
    self.assertEqual(res.headers['X-Content-Type-Options'], 'nosniff')
    self.assertEqual(res.text, 'try again later\n')

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
