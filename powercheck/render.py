"""OpenGL drawing of the battery level and buttons as white line strips."""

import logging

from powercheck import power, ui

logger = logging.getLogger(__name__)

VERTEX_SHADER_SOURCE = """#version 410 core
layout (location = 0) in vec3 position;

void main() {
    gl_Position = vec4(position, 1.0);
}
"""

FRAGMENT_SHADER_SOURCE = """#version 410 core
out vec4 FragColor;

void main() {
    FragColor = vec4(1.0, 1.0, 1.0, 0.7);
}
"""

LINE_WIDTH = 3.0
CLEAR_COLOR = (0.0, 0.0, 0.0, 0.9)


def line_strips(counts):
    """Yield ``(start, count)`` for consecutive strips of ``counts`` points."""
    start = 0
    for count in counts:
        yield start, count
        start += count


class Renderer:
    """Shader program and GL state for drawing line strips.

    Needs a current OpenGL context. Raises
    ``pyglet.graphics.shader.ShaderException`` if a shader fails to compile.
    """

    def __init__(self):
        import pyglet.gl as gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        gl.glEnable(gl.GL_BLEND)
        gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)

        vertex = Shader(VERTEX_SHADER_SOURCE, "vertex")
        fragment = Shader(FRAGMENT_SHADER_SOURCE, "fragment")
        self._program = ShaderProgram(vertex, fragment)
        self._mode = gl.GL_LINE_STRIP

        try:
            gl.glLineWidth(LINE_WIDTH)
        except gl.GLException as exc:
            # Core profiles may reject wide lines; thin lines still work.
            logger.debug("line width not supported: %s", exc)
        self._program.use()
        gl.glClearColor(*CLEAR_COLOR)

    def draw(self, vertices, counts):
        """Draw flat (x, y, z) ``vertices`` as strips of ``counts`` points."""
        self._program.use()
        for start, count in line_strips(counts):
            data = vertices[start * 3:(start + count) * 3]
            vertex_list = self._program.vertex_list(
                count, self._mode, position=("f", data)
            )
            try:
                vertex_list.draw(self._mode)
            finally:
                vertex_list.delete()

    def digits(self):
        """Draw the current battery percentage."""
        self.draw(*ui.get_digits(power.show()))

    def buttons(self):
        """Draw the button captions and outlines."""
        self.draw(*ui.get_buttons())