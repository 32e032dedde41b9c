from data_designer.plugins.plugin import Plugin, PluginType

keyword_density_plugin = Plugin(
    config_qualified_name="data_designer_content_scan.config.KeywordDensityColumnConfig",
    impl_qualified_name="data_designer_content_scan.generator.KeywordDensityColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)

ai_detector_plugin = Plugin(
    config_qualified_name="data_designer_content_scan.config.AIDetectorColumnConfig",
    impl_qualified_name="data_designer_content_scan.generator.AIDetectorColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
