"""工具模块

认证、权限、分页、异常与日志等通用工具；请直接从对应子模块导入
"""
