from .generator import SqlMapGenerator
from .introspected_table import IntrospectedTable
from .comment_generator import CommentGeneratorConfig, DefaultCommentGenerator
from .factory import create_sql_map_generator

__all__ = ['SqlMapGenerator', 'IntrospectedTable', 'CommentGeneratorConfig',
           'DefaultCommentGenerator', 'create_sql_map_generator']
