import pytest

from doclifecycle.errors import HookRegistrationError
from doclifecycle.schema import POST, PRE, HookContext, HookRegistry, Schema


def test_pre_and_post_hooks_run_in_registration_order():
    schema = Schema("sample")
    calls = []
    schema.pre("save", lambda doc, ctx: calls.append(("pre-1", doc)))
    schema.pre("save", lambda doc, ctx: calls.append(("pre-2", doc)))
    schema.post("save", lambda doc, ctx: calls.append(("post", doc)))

    context = HookContext("save")
    schema.hooks.run(PRE, "save", "doc", context)
    schema.hooks.run(POST, "save", "doc", context)

    assert calls == [("pre-1", "doc"), ("pre-2", "doc"), ("post", "doc")]


def test_unsupported_operation_is_rejected():
    schema = Schema()
    with pytest.raises(HookRegistrationError, match="validate"):
        schema.pre("validate", lambda doc, ctx: None)


def test_non_callable_hook_is_rejected():
    registry = HookRegistry()
    with pytest.raises(HookRegistrationError):
        registry.register(PRE, "remove", None)


def test_unknown_phase_is_rejected():
    registry = HookRegistry()
    with pytest.raises(HookRegistrationError, match="phase"):
        registry.register("around", "save", lambda doc, ctx: None)


def test_remove_hook_unregisters_handler():
    schema = Schema()
    calls = []

    def hook(doc, ctx):
        calls.append(doc)

    schema.post("remove", hook)
    assert schema.remove_hook(POST, "remove", hook) is True
    assert schema.remove_hook(POST, "remove", hook) is False

    schema.hooks.run(POST, "remove", "doc", HookContext("remove"))
    assert calls == []


def test_hook_context_is_unique_per_invocation():
    first = HookContext("save")
    second = HookContext("save")
    assert first.invocation_id != second.invocation_id
    assert first.state == {} and first.state is not second.state


def test_plugin_receives_schema_and_options():
    schema = Schema()
    received = []

    def plugin(target, options=None):
        received.append((target, options))

    schema.plugin(plugin, {"flag": True})
    assert received == [(schema, {"flag": True})]
    assert schema.plugins == [plugin]


def test_plugin_deduplicated_by_default():
    schema = Schema()
    applied = []

    def plugin(target):
        applied.append(target)

    schema.plugin(plugin).plugin(plugin)
    assert applied == [schema]

    schema.plugin(plugin, deduplicate=False)
    assert applied == [schema, schema]


def test_schema_events_are_independent_of_hooks():
    schema = Schema()
    seen = []
    schema.on("custom", seen.append)

    assert schema.emit("custom", 1) is True
    assert seen == [1]
    assert schema.hooks.hooks_for(PRE, "save") == []
