from dts_to_cjs.rewriter import convert_dts_to_commonjs, default_namespace_name, rewrite


__version__ = "0.1.0"

__all__ = ["convert_dts_to_commonjs", "default_namespace_name", "rewrite"]
