# -*- coding: utf-8 -*-
# Protocol buffer module for proto/chat.proto.
# The file descriptor is assembled with descriptor_pb2 and registered the same
# way protoc-generated modules register their serialized descriptor.
"""Generated protocol buffer code."""
from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder

_sym_db = _symbol_database.Default()

_FIELD = _descriptor_pb2.FieldDescriptorProto


def _serialized_file():
    file_proto = _descriptor_pb2.FileDescriptorProto(
        name="chat.proto", package="causalchat", syntax="proto3")

    chat_message = file_proto.message_type.add(name="ChatMessage")
    chat_message.field.add(name="transcript", number=1, type=_FIELD.TYPE_STRING,
                           label=_FIELD.LABEL_OPTIONAL, json_name="transcript")
    chat_message.field.add(name="oid", number=2, type=_FIELD.TYPE_STRING,
                           label=_FIELD.LABEL_OPTIONAL, json_name="oid")
    chat_message.field.add(name="sender_index", number=3, type=_FIELD.TYPE_UINT32,
                           label=_FIELD.LABEL_OPTIONAL, json_name="senderIndex")
    chat_message.field.add(name="values", number=4, type=_FIELD.TYPE_UINT64,
                           label=_FIELD.LABEL_REPEATED, json_name="values")
    chat_message.field.add(name="self_index", number=5, type=_FIELD.TYPE_UINT32,
                           label=_FIELD.LABEL_OPTIONAL, json_name="selfIndex")

    ack = file_proto.message_type.add(name="Ack")
    ack.field.add(name="status", number=1, type=_FIELD.TYPE_STRING,
                  label=_FIELD.LABEL_OPTIONAL, json_name="status")
    ack.field.add(name="message", number=2, type=_FIELD.TYPE_STRING,
                  label=_FIELD.LABEL_OPTIONAL, json_name="message")

    service = file_proto.service.add(name="ChatService")
    service.method.add(name="MessagePost", input_type=".causalchat.ChatMessage",
                       output_type=".causalchat.Ack")
    return file_proto.SerializeToString()


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(_serialized_file())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'proto.chat_pb2', _globals)
# @@protoc_insertion_point(module_scope)
