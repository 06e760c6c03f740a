"""配置模块

包含应用设置、中间件配置和异常处理配置。
应用装配函数请直接从 config.app_config / config.middleware / config.exception_handlers 导入，
以免 config.settings 被模型层导入时触发路由的循环导入。
"""
