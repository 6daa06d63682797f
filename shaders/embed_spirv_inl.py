#!/usr/bin/env python3

import argparse
import subprocess
from dataclasses import dataclass

from spirv_inl_names import to_file_stem, to_variable_name

COMPILER = ("glslangValidator", "--target-env", "vulkan1.2")
SHADERS = (
    "shader.vert",
    "shader.frag",
)


@dataclass(frozen=True)
class ShaderConfig:
    compiler: tuple = COMPILER
    shaders: tuple = SHADERS


DEFAULT_CONFIG = ShaderConfig()


def embed_shaders(config=DEFAULT_CONFIG, run=subprocess.check_call):
    """Compile each shader in order to a <stem>.inl in the working directory.

    `run` gets the full argv for one shader and must block until the
    compiler exits. A failing compile raises out of here and the remaining
    shaders are not compiled.
    """
    outputs = []
    for shader in config.shaders:
        var_name = to_variable_name(shader)
        output = "{}.inl".format(to_file_stem(var_name))
        print("Embedding {} as {} in {}".format(shader, var_name, output))
        run(list(config.compiler) + ["-o", output, "--variable-name", var_name, shader])
        outputs.append(output)
    return outputs


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Compile shaders to SPIR-V .inl headers with {}".format(COMPILER[0]))
    parser.parse_args(argv)

    embed_shaders(DEFAULT_CONFIG)


if __name__ == "__main__":
    main()
