"""
Tensor control-path manager for element-kind dispatch.

This module defines a shared control-path manager used to register and resolve
element-kind-specific implementations of Tensor (and sampler) methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"kind"``. As a result, method
dispatch is performed based on the runtime value of ``self.kind``.

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, ElementKind.INTEGER)
    def op_integer(self, ...): ...

    @tensor_control_path_manager(TensorMixin, TensorMixin.op, ElementKind.FLOATING)
    def op_floating(self, ...): ...

At runtime, calling ``Tensor.op(...)`` dispatches to the implementation whose
registered kind matches ``self.kind``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches methods based on `self.kind`
tensor_control_path_manager = create_path_builder("kind")
