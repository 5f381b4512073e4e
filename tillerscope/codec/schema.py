"""Protobuf message classes for Tiller release records.

Tiller stores each release as a serialized ``hapi.release.Release``
message. Only the fields the listing needs are declared here; field numbers
match Helm v2's ``hapi`` protos so real records parse, and undeclared
fields (values, hooks, templates) are carried as unknown fields.

The descriptors are assembled at import time in a private pool so that the
classes never collide with another copy of the ``hapi`` protos loaded into
the default pool.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory, timestamp_pb2

from tillerscope.models.release import ReleaseStatus

_F = descriptor_pb2.FieldDescriptorProto


def _field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    field_type: int,
    type_name: str = "",
    *,
    repeated: bool = False,
) -> None:
    field = message.field.add(
        name=name,
        number=number,
        type=field_type,
        label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = type_name


def _chart_file() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(
        name="hapi/chart/chart.proto",
        package="hapi.chart",
        syntax="proto3",
    )

    metadata = proto.message_type.add(name="Metadata")
    _field(metadata, "name", 1, _F.TYPE_STRING)
    _field(metadata, "home", 2, _F.TYPE_STRING)
    _field(metadata, "sources", 3, _F.TYPE_STRING, repeated=True)
    _field(metadata, "version", 4, _F.TYPE_STRING)
    _field(metadata, "description", 5, _F.TYPE_STRING)
    _field(metadata, "keywords", 6, _F.TYPE_STRING, repeated=True)
    _field(metadata, "icon", 9, _F.TYPE_STRING)
    _field(metadata, "api_version", 10, _F.TYPE_STRING)
    _field(metadata, "app_version", 13, _F.TYPE_STRING)

    chart = proto.message_type.add(name="Chart")
    _field(chart, "metadata", 1, _F.TYPE_MESSAGE, ".hapi.chart.Metadata")
    return proto


def _release_file() -> descriptor_pb2.FileDescriptorProto:
    proto = descriptor_pb2.FileDescriptorProto(
        name="hapi/release/release.proto",
        package="hapi.release",
        syntax="proto3",
        dependency=["google/protobuf/timestamp.proto", "hapi/chart/chart.proto"],
    )

    status = proto.message_type.add(name="Status")
    code = status.enum_type.add(name="Code")
    for member in ReleaseStatus:
        code.value.add(name=member.name, number=member.value)
    _field(status, "code", 1, _F.TYPE_ENUM, ".hapi.release.Status.Code")
    _field(status, "notes", 4, _F.TYPE_STRING)

    info = proto.message_type.add(name="Info")
    _field(info, "status", 1, _F.TYPE_MESSAGE, ".hapi.release.Status")
    _field(info, "first_deployed", 2, _F.TYPE_MESSAGE, ".google.protobuf.Timestamp")
    _field(info, "last_deployed", 3, _F.TYPE_MESSAGE, ".google.protobuf.Timestamp")
    _field(info, "deleted", 4, _F.TYPE_MESSAGE, ".google.protobuf.Timestamp")
    _field(info, "Description", 5, _F.TYPE_STRING)

    release = proto.message_type.add(name="Release")
    _field(release, "name", 1, _F.TYPE_STRING)
    _field(release, "info", 2, _F.TYPE_MESSAGE, ".hapi.release.Info")
    _field(release, "chart", 3, _F.TYPE_MESSAGE, ".hapi.chart.Chart")
    _field(release, "manifest", 5, _F.TYPE_STRING)
    _field(release, "version", 7, _F.TYPE_INT32)
    _field(release, "namespace", 8, _F.TYPE_STRING)
    return proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(timestamp_pb2.DESCRIPTOR.serialized_pb)
_pool.AddSerializedFile(_chart_file().SerializeToString())
_pool.AddSerializedFile(_release_file().SerializeToString())

Release = message_factory.GetMessageClass(_pool.FindMessageTypeByName("hapi.release.Release"))
Chart = message_factory.GetMessageClass(_pool.FindMessageTypeByName("hapi.chart.Chart"))
Metadata = message_factory.GetMessageClass(_pool.FindMessageTypeByName("hapi.chart.Metadata"))

__all__ = ["Chart", "Metadata", "Release"]
