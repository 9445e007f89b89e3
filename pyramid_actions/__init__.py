# -*- coding: utf-8 -*-
#------------------------------------------------------------------------------
# file: $Id$
# lib:  pyramid_actions
# desc: request-scoped controllers whose methods are pyramid views.
# date: 2026/10/18
# copy: (C) Copyright 2026 Cadit Inc., see LICENSE.txt
#------------------------------------------------------------------------------

from .integration import includeme, add_action
from .controller import IController, Controller
from .dispatcher import \
  action, controllerType, \
  RegistrationError, NotCallable, ArityMismatch, InvalidReturnType, \
  ContractNotSatisfied, ControllerError, InitializationError, ActionError
from .view import ViewController

#------------------------------------------------------------------------------
# end of $Id$
#------------------------------------------------------------------------------
