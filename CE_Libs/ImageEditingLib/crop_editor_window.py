import logging
from typing import Optional

from PIL import Image
from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QColor, QImage, QPainter, QPen
from PyQt5.QtWidgets import QMainWindow, QMessageBox, QWidget

from CE_Libs.constants import BUTTON_ESCAPE, BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT, OUTCOME_DEFERRED, WINDOW_TITLE
from CE_Libs.editor_config import EditorConfig
from CE_Libs.GeometryLib.geometry_models import Point2, Size2D
from CE_Libs.ImageEditingLib.image_editing_ops import image_to_array
from CE_Libs.ImageEditingLib.image_models import ImageRecord
from CE_Libs.SelectionLib.crop_session import CropSession, FrameInput, FrameOutput
from CE_Libs.SelectionLib.selection_models import ButtonEvent

logger = logging.getLogger(__name__)

_MOUSE_BUTTONS = {
    Qt.LeftButton: BUTTON_LEFT,
    Qt.RightButton: BUTTON_RIGHT,
    Qt.MiddleButton: BUTTON_MIDDLE,
}


def pil_to_qimage(image: 'Image.Image') -> QImage:
    pixels = image_to_array(image)
    height, width = pixels.shape[:2]
    qimage = QImage(pixels.data, width, height, width * 4, QImage.Format_RGBA8888)
    # Detach from the numpy buffer before it goes out of scope
    return qimage.copy()


class CropCanvas(QWidget):
    """Draws the fitted image and the live selection; forwards input to the session."""

    def __init__(self, session: CropSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self.on_frame_output = None
        self.on_save_error = None
        self._texture = pil_to_qimage(session.image)

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)

    def reload_texture(self) -> None:
        self._texture = pil_to_qimage(self.session.image)

    def _dispatch(self, frame: FrameInput) -> None:
        try:
            output = self.session.tick(frame)
        except OSError as e:
            logger.error(f"Failed to save image: {e}")
            if self.on_save_error is not None:
                self.on_save_error(e)
            return

        if output.image_changed:
            self.reload_texture()
        if self.on_frame_output is not None:
            self.on_frame_output(output)
        self.update()

    def resizeEvent(self, event) -> None:
        size = event.size()
        self._dispatch(FrameInput(window_size=Size2D(max(0, size.width()), max(0, size.height()))))
        super().resizeEvent(event)

    def mouseMoveEvent(self, event) -> None:
        pos = event.localPos()
        self._dispatch(FrameInput(pointer=Point2(pos.x(), pos.y())))

    def mousePressEvent(self, event) -> None:
        self._mouse_button(event, pressed=True)

    def mouseReleaseEvent(self, event) -> None:
        self._mouse_button(event, pressed=False)

    def _mouse_button(self, event, pressed: bool) -> None:
        button = _MOUSE_BUTTONS.get(event.button())
        if button is None:
            return
        pos = event.localPos()
        self._dispatch(FrameInput(button=ButtonEvent(button, pressed), pointer=Point2(pos.x(), pos.y())))

    def keyReleaseEvent(self, event) -> None:
        if event.key() == Qt.Key_Escape and not event.isAutoRepeat():
            self._dispatch(FrameInput(button=ButtonEvent(BUTTON_ESCAPE, False)))
            return
        super().keyReleaseEvent(event)

    def paintEvent(self, event) -> None:
        config = self.session.config
        render = self.session.render_state()

        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(config.background_color))

        transform = render.transform
        if transform.is_invertible:
            width, height = transform.forward_size(render.image_size)
            painter.drawImage(QRectF(transform.tx, transform.ty, width, height), self._texture)

        if render.selection is not None:
            anchor, corner = render.selection
            painter.setPen(QPen(QColor(config.outline_color), config.outline_width))
            painter.setBrush(Qt.NoBrush)
            painter.drawRect(QRectF(QPointF(anchor.x, anchor.y), QPointF(corner.x, corner.y)).normalized())

        painter.end()


class CropEditorWindow(QMainWindow):
    def __init__(self, record: ImageRecord, config: Optional[EditorConfig] = None) -> None:
        super().__init__()
        self.config = config if config is not None else EditorConfig()
        self.session = CropSession(record, self.config)

        self.resize(self.config.window_width, self.config.window_height)
        self._build_ui()
        self._update_title()

    def _build_ui(self) -> None:
        self.canvas = CropCanvas(self.session, self)
        self.canvas.on_frame_output = self.on_frame_output
        self.canvas.on_save_error = self.on_save_error
        self.setCentralWidget(self.canvas)
        self.canvas.setFocus()

    def on_frame_output(self, output: FrameOutput) -> None:
        if output.resolution is not None and output.resolution.status == OUTCOME_DEFERRED:
            self.statusBar().showMessage("Window too small to resolve the selection, drag again", 3000)

        if output.image_changed:
            self._update_title()

        if output.should_close:
            self.close()

    def on_save_error(self, error: OSError) -> None:
        self._show_error("Save Failed", f"Could not save image to {self.config.output_path}:\n{error}")

    def _update_title(self) -> None:
        size = self.session.record.size
        name = self.session.record.source_name
        self.setWindowTitle(f"{WINDOW_TITLE} - {name} ({size.width}x{size.height})")

    def _show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self, title, message)
