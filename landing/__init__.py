"""Landing pages da ODuo com captura de leads."""
