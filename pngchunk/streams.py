import io


class Stream(object):
    '''This is a simple wrapper around an in-memory buffer to
    uniform its properties: the field codecs only need read(), tell()
    and to know how much is left.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self.__class__, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to stream from' % self._type.__name__)

        init_method(self)
        self._size = len(self.obj.getvalue())

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __len__(self):
        return self._size

    def __repr__(self):
        return '<%s(%s, offset=%d)>' % (self.__class__.__name__, self._type.__name__, self.obj.tell())

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def remaining(self):
        return self._size - self.obj.tell()

