"""Registers the ``writing-feedback`` column type.

Exposed through the ``data_designer.plugins`` entry point group, so installing
the package is enough for Data Designer to pick it up.
"""

from data_designer.plugins.plugin import Plugin, PluginType

writing_feedback_plugin = Plugin(
    config_qualified_name="data_designer_writing_feedback.config.WritingFeedbackColumnConfig",
    impl_qualified_name="data_designer_writing_feedback.generator.WritingFeedbackColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
