########################################################################################
##
##                 TSITOURAS-PAPAKOSTAS EXPLICIT RUNGE-KUTTA TABLE
##                                 (tables/rktp64.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._tableau import RungeKuttaTable


# TABLES ===============================================================================

class RKTP64(RungeKuttaTable):
    """Tsitouras-Papakostas 6(4) pair. Seven stages, 6th order with
    embedded 4th order error estimate and a 4th order interpolant.

    Characteristics
    ---------------
    * Order: 6 (propagating) / 4 (embedded)
    * Stages: 7
    * Interpolant order: 4

    Note
    ----
    High order for few stages. Worth it for smooth problems at tight
    tolerances. With delays, the propagated discontinuities are only
    tracked up to the interpolant order.

    References
    ----------
    .. [1] Tsitouras, Ch., & Papakostas, S. N. (1999). "Cheap error estimation
           for Runge-Kutta methods". SIAM Journal on Scientific Computing,
           20(6), 2067-2088. :doi:`10.1137/S1064827596302230`

    """

    def __init__(self):
        super().__init__()

        #number of stages in RK scheme
        self.s = 7

        #order of scheme, embedded method and interpolant
        self.n = 6
        self.m = 4
        self.order_interpolant = 4

        #intermediate evaluation times
        self.eval_stages = [
            0.0,
            4/27,
            2/9,
            3/7,
            11/16,
            10/13,
            1.0
            ]

        #butcher table
        self.BT = {
            1: [0.14814814814814814814814814814814814814814814814815],
            2: [0.05555555555555555555555555555555555555555555555556,
                0.16666666666666666666666666666666666666666666666667],
            3: [0.19241982507288629737609329446064139941690962099125,
                -0.53134110787172011661807580174927113702623906705539,
                0.76749271137026239067055393586005830903790087463557],
            4: [0.27138264973958333333333333333333333333333333333333,
                -0.28179931640625000000000000000000000000000000000000,
                0.10191932091346153846153846153846153846153846153846,
                0.59599734575320512820512820512820512820512820512821],
            5: [-0.12140681348692272679528027730121494345436084170722,
                0.47761410187445690404270285927090660818471469359043,
                0.12192296968479080920271208457739825271063725338342,
                0.00820786686248269381285345905535723094994297948894,
                0.28289264429596155050624264362832208237829668447521],
            6: [0.32310946589106292966684294024325753569539925965098,
                -0.61039132734003172924378635642517186673717609730301,
                0.45846867541639319976612888047255080412929454343221,
                0.57505740806711566278133278660922926335638856572569,
                -0.57379234522267681781745625845989491691225880929347,
                0.82754812318813675484693800756002918046835253778760]
            }

        #final update weights
        self.b = [
            0.07277777777777777777777777777777777777777777777778,
            0.0,
            0.28752127070690503526324421846809906511399048712482,
            0.18974846220396832187710941882243328294496258901153,
            0.10581736348682550735167973519824811036097403449285,
            0.26909544328484081804764916719375922411975542905334,
            0.07503968253968253968253968253968253968253968253968
            ]

        #embedded weights
        self.b2 = [
            0.10322666047518118524035683798997408464864086165861,
            0.0,
            0.15611542056134071025476537742246069068941506933613,
            0.38634918851063907802720917783777796648011517818308,
            -0.12073095208684351320487107578989528150071079171750,
            0.4,
            0.07503968253968253968253968253968253968253968253968
            ]

        #quartic interpolant
        self.BI = [
            [0.0, 1.0,
             -3.18888888888888888888888888888888888888888888888890,
             3.62962962962962962962962962962962962962962962962960,
             -1.36796296296296296296296296296296296296296296296300],
            [0.0],
            [0.0, 0.0,
             3.13664097096932917828440216499917992455305888141710,
             -4.87567656224372642283090044284074134820403477119900,
             2.02655686198130227980974249630966048876496637690670],
            [0.0, 0.0,
             1.44306660772178013557323902151488358384910109048040,
             -2.68732193732193732193732193732193732193732193732190,
             1.43400379180412550824119233462948702103318343585310],
            [0.0, 0.0,
             -1.84105678504031566306399039286326985760850917824670,
             5.43416252072968490878938640132669983416252072968490,
             -3.48728837220254373837371627326518186619303751694540],
            [0.0, 0.0, 0.0, 0.0,
             0.26909544328484081804764916719375922411975542905334],
            [0.0, 0.0,
             0.45023809523809523809523809523809523809523809523810,
             -1.50079365079365079365079365079365079365079365079370,
             1.12559523809523809523809523809523809523809523809520]
            ]

        self._build()
