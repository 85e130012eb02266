###############################################################################
##
##  Copyright (C) 2013-2014 Tavendo GmbH
##
##  Licensed under the Apache License, Version 2.0 (the "License");
##  you may not use this file except in compliance with the License.
##  You may obtain a copy of the License at
##
##      http://www.apache.org/licenses/LICENSE-2.0
##
##  Unless required by applicable law or agreed to in writing, software
##  distributed under the License is distributed on an "AS IS" BASIS,
##  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
##  See the License for the specific language governing permissions and
##  limitations under the License.
##
###############################################################################

__all__ = ['EqualityMixin']



class EqualityMixin:
   """
   Mixin providing value equality over the public attributes of an instance.
   """

   def __eq__(self, other):
      if not isinstance(other, self.__class__):
         return False
      ## we only want the actual message data attributes (not eg _frozen)
      for k in self.__dict__:
         if not k.startswith('_'):
            if not self.__dict__[k] == other.__dict__[k]:
               return False
      return True


   def __ne__(self, other):
      return not self.__eq__(other)


   ## instances are compared by value, but may carry mutable JSON payloads
   __hash__ = None
