"""
QR code generation for event share links
"""

import io
import qrcode

class QRService:
    """Service for generating QR codes"""

    @staticmethod
    def generate_qr(url: str, format: str = 'PNG') -> bytes:
        """Render a QR code pointing at the given URL"""
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=4,
        )
        qr.add_data(url)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buffer = io.BytesIO()
        img.save(buffer, format=format)

        return buffer.getvalue()
