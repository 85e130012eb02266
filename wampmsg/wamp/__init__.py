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

from wampmsg.wamp.exception import Error, \
                                   ProtocolError, \
                                   MalformedFrame, \
                                   InvalidId, \
                                   ExtensionMessage, \
                                   FieldTypeMismatch, \
                                   UnexpectedMessageType, \
                                   SerializationError, \
                                   JsonError

from wampmsg.wamp.role import Role, ROLES

from wampmsg.wamp.message import code_for, \
                                 kind_for, \
                                 field_schema

from wampmsg.wamp.direction import Permission, \
                                   get_message_direction

from wampmsg.wamp.serializer import decode, \
                                    encode, \
                                    decode_text, \
                                    encode_text, \
                                    JsonObjectSerializer, \
                                    WampJsonSerializer
