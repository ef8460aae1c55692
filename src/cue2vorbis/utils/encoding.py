"""Encoding detection and conversion utilities"""
import codecs

import chardet


def decode_cue_bytes(raw_data, log_func, encoding=None):
    """
    Decode raw CUE file content to text.

    UTF-8 content (with or without BOM) is decoded directly; anything else
    goes through chardet, since rippers still write cp1251 or Shift-JIS sheets.

    Args:
        raw_data: Bytes read from the CUE file
        log_func: Function to call for logging messages
        encoding: Force this encoding and skip detection

    Returns:
        Decoded text

    Raises:
        UnicodeDecodeError: If the content does not decode with the chosen encoding
        LookupError: If the forced or detected encoding is unknown
    """
    if encoding:
        log_func(f"📝 Decoding CUE file as {encoding} (forced)")
        return _strip_bom(raw_data.decode(encoding))

    if raw_data.startswith(codecs.BOM_UTF8):
        log_func("📝 CUE file has a UTF-8 BOM")
        return raw_data[len(codecs.BOM_UTF8):].decode('utf-8')

    try:
        text = raw_data.decode('utf-8')
        log_func("✅ CUE file is already UTF-8, no conversion needed")
        return text
    except UnicodeDecodeError:
        pass

    result = chardet.detect(raw_data)
    detected_encoding = result.get('encoding') if result else None
    if not detected_encoding:
        log_func("⚠️ Could not detect encoding, falling back to latin-1")
        return raw_data.decode('latin-1')

    confidence = result.get('confidence') or 0
    log_func(f"📝 CUE file encoding detected: {detected_encoding} (confidence: {confidence:.2%})")
    return _strip_bom(raw_data.decode(detected_encoding))


def _strip_bom(text):
    return text[1:] if text.startswith('\ufeff') else text
