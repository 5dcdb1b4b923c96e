"""Static table of Material icon names and their qtawesome glyphs.

Keys are Material Design icon names; values are glyph ids from the ``mdi6``
font bundled with qtawesome. Table order is the picker's display order.
"""

MATERIAL_ICONS = {
    'threesixty': 'mdi6.rotate-360',
    'threed_rotation': 'mdi6.rotate-3d-variant',
    'four_k': 'mdi6.video-4k-box',
    'ac_unit': 'mdi6.snowflake',
    'access_alarm': 'mdi6.alarm',
    'access_alarms': 'mdi6.alarm-multiple',
    'access_time': 'mdi6.clock-outline',
    'accessibility': 'mdi6.human',
    'accessibility_new': 'mdi6.human-handsup',
    'accessible': 'mdi6.wheelchair-accessibility',
    'accessible_forward': 'mdi6.wheelchair-accessibility',
    'account_balance': 'mdi6.bank',
    'account_balance_wallet': 'mdi6.wallet',
    'account_box': 'mdi6.account-box',
    'account_circle': 'mdi6.account-circle',
    'adb': 'mdi6.android',
    'add': 'mdi6.plus',
    'add_a_photo': 'mdi6.camera-plus',
    'add_alarm': 'mdi6.alarm-plus',
    'add_alert': 'mdi6.bell-plus',
    'add_box': 'mdi6.plus-box',
    'add_call': 'mdi6.phone-plus',
    'add_circle': 'mdi6.plus-circle',
    'add_circle_outline': 'mdi6.plus-circle-outline',
    'add_comment': 'mdi6.comment-plus',
    'add_location': 'mdi6.map-marker-plus',
    'add_photo_alternate': 'mdi6.image-plus',
    'add_shopping_cart': 'mdi6.cart-plus',
    'add_to_home_screen': 'mdi6.cellphone-arrow-down',
    'add_to_photos': 'mdi6.image-multiple',
    'add_to_queue': 'mdi6.playlist-plus',
    'adjust': 'mdi6.adjust',
    'airline_seat_flat': 'mdi6.seat-flat',
    'airline_seat_flat_angled': 'mdi6.seat-flat-angled',
    'airline_seat_individual_suite': 'mdi6.seat-individual-suite',
    'airline_seat_legroom_extra': 'mdi6.seat-legroom-extra',
    'airline_seat_legroom_normal': 'mdi6.seat-legroom-normal',
    'airline_seat_legroom_reduced': 'mdi6.seat-legroom-reduced',
    'airline_seat_recline_extra': 'mdi6.seat-recline-extra',
    'airline_seat_recline_normal': 'mdi6.seat-recline-normal',
    'airplanemode_active': 'mdi6.airplane',
    'airplanemode_inactive': 'mdi6.airplane-off',
    'airplay': 'mdi6.cast',
    'airport_shuttle': 'mdi6.van-passenger',
    'alarm': 'mdi6.alarm',
    'alarm_add': 'mdi6.alarm-plus',
    'alarm_off': 'mdi6.alarm-off',
    'alarm_on': 'mdi6.alarm-check',
    'album': 'mdi6.album',
    'all_inclusive': 'mdi6.all-inclusive',
    'all_out': 'mdi6.arrow-expand-all',
    'alternate_email': 'mdi6.at',
    'android': 'mdi6.android',
    'announcement': 'mdi6.bullhorn',
    'apps': 'mdi6.apps',
    'archive': 'mdi6.archive',
    'arrow_back': 'mdi6.arrow-left',
    'arrow_back_ios': 'mdi6.chevron-left',
    'arrow_downward': 'mdi6.arrow-down',
    'arrow_drop_down': 'mdi6.menu-down',
    'arrow_drop_down_circle': 'mdi6.arrow-down-drop-circle',
    'arrow_drop_up': 'mdi6.menu-up',
    'arrow_forward': 'mdi6.arrow-right',
    'arrow_forward_ios': 'mdi6.chevron-right',
    'arrow_left': 'mdi6.menu-left',
    'arrow_right': 'mdi6.menu-right',
    'arrow_upward': 'mdi6.arrow-up',
    'art_track': 'mdi6.view-agenda',
    'aspect_ratio': 'mdi6.aspect-ratio',
    'assessment': 'mdi6.chart-box',
    'assignment': 'mdi6.clipboard-text',
    'assignment_ind': 'mdi6.clipboard-account',
    'assignment_late': 'mdi6.clipboard-alert',
    'assignment_return': 'mdi6.clipboard-arrow-left',
    'assignment_returned': 'mdi6.clipboard-arrow-down',
    'assignment_turned_in': 'mdi6.clipboard-check',
    'assistant': 'mdi6.message-processing',
    'assistant_photo': 'mdi6.flag',
    'atm': 'mdi6.cash',
    'attach_file': 'mdi6.paperclip',
    'attach_money': 'mdi6.currency-usd',
    'attachment': 'mdi6.attachment',
    'audiotrack': 'mdi6.music-note',
    'autorenew': 'mdi6.autorenew',
    'av_timer': 'mdi6.timer-outline',
    'backspace': 'mdi6.backspace',
    'backup': 'mdi6.cloud-upload',
    'battery_alert': 'mdi6.battery-alert',
    'battery_charging_full': 'mdi6.battery-charging',
    'battery_full': 'mdi6.battery',
    'battery_std': 'mdi6.battery',
    'battery_unknown': 'mdi6.battery-unknown',
    'beach_access': 'mdi6.umbrella-beach',
    'beenhere': 'mdi6.check-decagram',
    'block': 'mdi6.cancel',
    'bluetooth': 'mdi6.bluetooth',
    'bluetooth_audio': 'mdi6.bluetooth-audio',
    'bluetooth_connected': 'mdi6.bluetooth-connect',
    'bluetooth_disabled': 'mdi6.bluetooth-off',
    'bluetooth_searching': 'mdi6.bluetooth-settings',
    'blur_circular': 'mdi6.blur-radial',
    'blur_linear': 'mdi6.blur-linear',
    'blur_off': 'mdi6.blur-off',
    'blur_on': 'mdi6.blur',
    'book': 'mdi6.book',
    'bookmark': 'mdi6.bookmark',
    'bookmark_border': 'mdi6.bookmark-outline',
    'border_all': 'mdi6.border-all',
    'border_bottom': 'mdi6.border-bottom',
    'border_clear': 'mdi6.border-none',
    'border_color': 'mdi6.border-color',
    'border_horizontal': 'mdi6.border-horizontal',
    'border_inner': 'mdi6.border-inside',
    'border_left': 'mdi6.border-left',
    'border_outer': 'mdi6.border-outside',
    'border_right': 'mdi6.border-right',
    'border_style': 'mdi6.border-style',
    'border_top': 'mdi6.border-top',
    'border_vertical': 'mdi6.border-vertical',
    'branding_watermark': 'mdi6.watermark',
    'brightness_1': 'mdi6.brightness-1',
    'brightness_2': 'mdi6.brightness-2',
    'brightness_3': 'mdi6.brightness-3',
    'brightness_4': 'mdi6.brightness-4',
    'brightness_5': 'mdi6.brightness-5',
    'brightness_6': 'mdi6.brightness-6',
    'brightness_7': 'mdi6.brightness-7',
    'brightness_auto': 'mdi6.brightness-auto',
    'brightness_high': 'mdi6.brightness-7',
    'brightness_low': 'mdi6.brightness-5',
    'brightness_medium': 'mdi6.brightness-6',
    'broken_image': 'mdi6.image-broken',
    'brush': 'mdi6.brush',
    'bubble_chart': 'mdi6.chart-bubble',
    'bug_report': 'mdi6.bug',
    'build': 'mdi6.wrench',
    'burst_mode': 'mdi6.image-multiple',
    'business': 'mdi6.domain',
    'business_center': 'mdi6.briefcase',
    'cached': 'mdi6.cached',
    'cake': 'mdi6.cake-variant',
    'calendar_today': 'mdi6.calendar-today',
    'calendar_view_day': 'mdi6.view-day',
    'call': 'mdi6.phone',
    'call_end': 'mdi6.phone-hangup',
    'call_made': 'mdi6.arrow-top-right',
    'call_merge': 'mdi6.call-merge',
    'call_missed': 'mdi6.phone-missed',
    'call_missed_outgoing': 'mdi6.phone-missed',
    'call_received': 'mdi6.arrow-bottom-left',
    'call_split': 'mdi6.call-split',
    'call_to_action': 'mdi6.page-layout-footer',
    'camera': 'mdi6.camera-iris',
    'camera_alt': 'mdi6.camera',
    'camera_enhance': 'mdi6.camera-enhance',
    'camera_front': 'mdi6.camera-front',
    'camera_rear': 'mdi6.camera-rear',
    'camera_roll': 'mdi6.filmstrip',
    'cancel': 'mdi6.close-circle',
    'card_giftcard': 'mdi6.gift',
    'card_membership': 'mdi6.card-account-details',
    'card_travel': 'mdi6.wallet-travel',
    'casino': 'mdi6.dice-5',
    'cast': 'mdi6.cast',
    'cast_connected': 'mdi6.cast-connected',
    'category': 'mdi6.shape',
    'center_focus_strong': 'mdi6.image-filter-center-focus',
    'center_focus_weak': 'mdi6.image-filter-center-focus-weak',
    'change_history': 'mdi6.triangle-outline',
    'chat': 'mdi6.chat',
    'chat_bubble': 'mdi6.message',
    'chat_bubble_outline': 'mdi6.message-outline',
    'check': 'mdi6.check',
    'check_box': 'mdi6.checkbox-marked',
    'check_box_outline_blank': 'mdi6.checkbox-blank-outline',
    'check_circle': 'mdi6.check-circle',
    'check_circle_outline': 'mdi6.check-circle-outline',
    'chevron_left': 'mdi6.chevron-left',
    'chevron_right': 'mdi6.chevron-right',
    'child_care': 'mdi6.baby-face-outline',
    'child_friendly': 'mdi6.baby-carriage',
    'chrome_reader_mode': 'mdi6.book-open-variant',
    'class_': 'mdi6.book',
    'clear': 'mdi6.close',
    'clear_all': 'mdi6.notification-clear-all',
    'close': 'mdi6.close',
    'closed_caption': 'mdi6.closed-caption',
    'cloud': 'mdi6.cloud',
    'cloud_circle': 'mdi6.cloud-circle',
    'cloud_done': 'mdi6.cloud-check',
    'cloud_download': 'mdi6.cloud-download',
    'cloud_off': 'mdi6.cloud-off-outline',
    'cloud_queue': 'mdi6.cloud-outline',
    'cloud_upload': 'mdi6.cloud-upload',
    'code': 'mdi6.code-tags',
    'collections': 'mdi6.image-multiple',
    'collections_bookmark': 'mdi6.bookmark-multiple',
    'color_lens': 'mdi6.palette',
    'colorize': 'mdi6.eyedropper',
    'comment': 'mdi6.comment',
    'compare': 'mdi6.compare',
    'compare_arrows': 'mdi6.compare-horizontal',
    'computer': 'mdi6.laptop',
    'confirmation_number': 'mdi6.ticket-confirmation',
    'contact_mail': 'mdi6.card-account-mail',
    'contact_phone': 'mdi6.card-account-phone',
    'contacts': 'mdi6.contacts',
    'content_copy': 'mdi6.content-copy',
    'content_cut': 'mdi6.content-cut',
    'content_paste': 'mdi6.content-paste',
    'control_point': 'mdi6.plus-circle-outline',
    'control_point_duplicate': 'mdi6.plus-circle-multiple-outline',
    'copyright': 'mdi6.copyright',
    'create': 'mdi6.pencil',
    'create_new_folder': 'mdi6.folder-plus',
    'credit_card': 'mdi6.credit-card',
    'crop': 'mdi6.crop',
    'crop_16_9': 'mdi6.crop-landscape',
    'crop_3_2': 'mdi6.crop-landscape',
    'crop_5_4': 'mdi6.crop-landscape',
    'crop_7_5': 'mdi6.crop-landscape',
    'crop_din': 'mdi6.crop-square',
    'crop_free': 'mdi6.crop-free',
    'crop_landscape': 'mdi6.crop-landscape',
    'crop_original': 'mdi6.image-outline',
    'crop_portrait': 'mdi6.crop-portrait',
    'crop_rotate': 'mdi6.crop-rotate',
    'crop_square': 'mdi6.crop-square',
    'dashboard': 'mdi6.view-dashboard',
    'data_usage': 'mdi6.chart-donut',
    'date_range': 'mdi6.calendar-range',
    'dehaze': 'mdi6.menu',
    'delete': 'mdi6.delete',
    'delete_forever': 'mdi6.delete-forever',
    'delete_outline': 'mdi6.delete-outline',
    'delete_sweep': 'mdi6.delete-sweep',
    'departure_board': 'mdi6.bus-clock',
    'description': 'mdi6.file-document',
    'desktop_mac': 'mdi6.desktop-classic',
    'desktop_windows': 'mdi6.monitor',
    'details': 'mdi6.triangle-outline',
    'developer_board': 'mdi6.developer-board',
    'developer_mode': 'mdi6.cellphone-cog',
    'device_hub': 'mdi6.lan',
    'device_unknown': 'mdi6.cellphone-information',
    'devices': 'mdi6.devices',
    'devices_other': 'mdi6.devices',
    'dialer_sip': 'mdi6.phone-voip',
    'dialpad': 'mdi6.dialpad',
    'directions': 'mdi6.directions',
    'directions_bike': 'mdi6.bike',
    'directions_boat': 'mdi6.ferry',
    'directions_bus': 'mdi6.bus',
    'directions_car': 'mdi6.car',
    'directions_railway': 'mdi6.train',
    'directions_run': 'mdi6.run',
    'directions_subway': 'mdi6.subway-variant',
    'directions_transit': 'mdi6.train',
    'directions_walk': 'mdi6.walk',
    'disc_full': 'mdi6.disc-alert',
    'dns': 'mdi6.dns',
    'do_not_disturb': 'mdi6.minus-circle-outline',
    'do_not_disturb_alt': 'mdi6.cancel',
    'do_not_disturb_off': 'mdi6.minus-circle-off',
    'do_not_disturb_on': 'mdi6.minus-circle',
    'dock': 'mdi6.cellphone-dock',
    'domain': 'mdi6.domain',
    'done': 'mdi6.check',
    'done_all': 'mdi6.check-all',
    'done_outline': 'mdi6.check-outline',
    'donut_large': 'mdi6.chart-donut',
    'donut_small': 'mdi6.chart-donut-variant',
    'drafts': 'mdi6.email-open',
    'drag_handle': 'mdi6.drag-horizontal',
    'drive_eta': 'mdi6.car',
    'dvr': 'mdi6.monitor',
    'edit': 'mdi6.pencil',
    'edit_attributes': 'mdi6.playlist-edit',
    'edit_location': 'mdi6.map-marker-radius',
    'eject': 'mdi6.eject',
    'email': 'mdi6.email',
    'enhanced_encryption': 'mdi6.lock-plus',
    'equalizer': 'mdi6.equalizer',
    'error': 'mdi6.alert-circle',
    'error_outline': 'mdi6.alert-circle-outline',
    'euro_symbol': 'mdi6.currency-eur',
    'ev_station': 'mdi6.ev-station',
    'event': 'mdi6.calendar',
    'event_available': 'mdi6.calendar-check',
    'event_busy': 'mdi6.calendar-remove',
    'event_note': 'mdi6.calendar-text',
    'event_seat': 'mdi6.seat',
    'exit_to_app': 'mdi6.exit-to-app',
    'expand_less': 'mdi6.chevron-up',
    'expand_more': 'mdi6.chevron-down',
    'explicit': 'mdi6.alpha-e-box',
    'explore': 'mdi6.compass',
    'exposure': 'mdi6.plus-minus-box',
    'exposure_neg_1': 'mdi6.numeric-negative-1',
    'exposure_neg_2': 'mdi6.minus-box',
    'exposure_plus_1': 'mdi6.numeric-positive-1',
    'exposure_plus_2': 'mdi6.plus-box',
    'exposure_zero': 'mdi6.numeric-0',
    'extension': 'mdi6.puzzle',
    'face': 'mdi6.face-man',
    'fast_forward': 'mdi6.fast-forward',
    'fast_rewind': 'mdi6.rewind',
    'fastfood': 'mdi6.food',
    'favorite': 'mdi6.heart',
    'favorite_border': 'mdi6.heart-outline',
    'featured_play_list': 'mdi6.playlist-play',
    'featured_video': 'mdi6.video-box',
    'feedback': 'mdi6.message-alert',
    'fiber_dvr': 'mdi6.record-rec',
    'fiber_manual_record': 'mdi6.record',
    'fiber_new': 'mdi6.new-box',
    'fiber_pin': 'mdi6.alpha-p-box',
    'fiber_smart_record': 'mdi6.record-circle-outline',
    'file_download': 'mdi6.download',
    'file_upload': 'mdi6.upload',
    'filter': 'mdi6.filter',
    'filter_1': 'mdi6.numeric-1-box-multiple-outline',
    'filter_2': 'mdi6.numeric-2-box-multiple-outline',
    'filter_3': 'mdi6.numeric-3-box-multiple-outline',
    'filter_4': 'mdi6.numeric-4-box-multiple-outline',
    'filter_5': 'mdi6.numeric-5-box-multiple-outline',
    'filter_6': 'mdi6.numeric-6-box-multiple-outline',
    'filter_7': 'mdi6.numeric-7-box-multiple-outline',
    'filter_8': 'mdi6.numeric-8-box-multiple-outline',
    'filter_9': 'mdi6.numeric-9-box-multiple-outline',
    'filter_9_plus': 'mdi6.numeric-9-plus-box-multiple-outline',
    'filter_b_and_w': 'mdi6.image-filter-black-white',
    'filter_center_focus': 'mdi6.image-filter-center-focus',
    'filter_drama': 'mdi6.image-filter-drama',
    'filter_frames': 'mdi6.image-frame',
    'filter_hdr': 'mdi6.image-filter-hdr',
    'filter_list': 'mdi6.filter-variant',
    'filter_none': 'mdi6.image-filter-none',
    'filter_tilt_shift': 'mdi6.image-filter-tilt-shift',
    'filter_vintage': 'mdi6.image-filter-vintage',
    'find_in_page': 'mdi6.file-find',
    'find_replace': 'mdi6.find-replace',
    'fingerprint': 'mdi6.fingerprint',
    'first_page': 'mdi6.page-first',
    'fitness_center': 'mdi6.dumbbell',
    'flag': 'mdi6.flag',
    'flare': 'mdi6.flare',
    'flash_auto': 'mdi6.flash-auto',
    'flash_off': 'mdi6.flash-off',
    'flash_on': 'mdi6.flash',
    'flight': 'mdi6.airplane',
    'flight_land': 'mdi6.airplane-landing',
    'flight_takeoff': 'mdi6.airplane-takeoff',
    'flip': 'mdi6.flip-horizontal',
    'flip_to_back': 'mdi6.flip-to-back',
    'flip_to_front': 'mdi6.flip-to-front',
    'folder': 'mdi6.folder',
    'folder_open': 'mdi6.folder-open',
    'folder_shared': 'mdi6.folder-account',
    'folder_special': 'mdi6.folder-star',
    'font_download': 'mdi6.format-font',
    'format_align_center': 'mdi6.format-align-center',
    'format_align_justify': 'mdi6.format-align-justify',
    'format_align_left': 'mdi6.format-align-left',
    'format_align_right': 'mdi6.format-align-right',
    'format_bold': 'mdi6.format-bold',
    'format_clear': 'mdi6.format-clear',
    'format_color_fill': 'mdi6.format-color-fill',
    'format_color_reset': 'mdi6.invert-colors-off',
    'format_color_text': 'mdi6.format-color-text',
    'format_indent_decrease': 'mdi6.format-indent-decrease',
    'format_indent_increase': 'mdi6.format-indent-increase',
    'format_italic': 'mdi6.format-italic',
    'format_line_spacing': 'mdi6.format-line-spacing',
    'format_list_bulleted': 'mdi6.format-list-bulleted',
    'format_list_numbered': 'mdi6.format-list-numbered',
    'format_list_numbered_rtl': 'mdi6.format-list-numbered-rtl',
    'format_paint': 'mdi6.format-paint',
    'format_quote': 'mdi6.format-quote-open',
    'format_shapes': 'mdi6.vector-square',
    'format_size': 'mdi6.format-size',
    'format_strikethrough': 'mdi6.format-strikethrough',
    'format_textdirection_l_to_r': 'mdi6.format-pilcrow-arrow-right',
    'format_textdirection_r_to_l': 'mdi6.format-pilcrow-arrow-left',
    'format_underlined': 'mdi6.format-underline',
    'forum': 'mdi6.forum',
    'forward': 'mdi6.share',
    'forward_10': 'mdi6.fast-forward-10',
    'forward_30': 'mdi6.fast-forward-30',
    'forward_5': 'mdi6.fast-forward-5',
    'free_breakfast': 'mdi6.coffee',
    'fullscreen': 'mdi6.fullscreen',
    'fullscreen_exit': 'mdi6.fullscreen-exit',
    'functions': 'mdi6.sigma',
    'g_translate': 'mdi6.google-translate',
    'gamepad': 'mdi6.gamepad-variant',
    'games': 'mdi6.gamepad',
    'gavel': 'mdi6.gavel',
    'gesture': 'mdi6.gesture',
    'get_app': 'mdi6.download',
    'gif': 'mdi6.file-gif-box',
    'golf_course': 'mdi6.golf',
    'gps_fixed': 'mdi6.crosshairs-gps',
    'gps_not_fixed': 'mdi6.crosshairs',
    'gps_off': 'mdi6.crosshairs-off',
    'grade': 'mdi6.star',
    'gradient': 'mdi6.gradient-vertical',
    'grain': 'mdi6.grain',
    'graphic_eq': 'mdi6.equalizer',
    'grid_off': 'mdi6.grid-off',
    'grid_on': 'mdi6.grid',
    'group': 'mdi6.account-group',
    'group_add': 'mdi6.account-multiple-plus',
    'group_work': 'mdi6.account-group-outline',
    'hd': 'mdi6.high-definition',
    'hdr_off': 'mdi6.hdr-off',
    'hdr_on': 'mdi6.hdr',
    'hdr_strong': 'mdi6.circle',
    'hdr_weak': 'mdi6.circle-outline',
    'headset': 'mdi6.headphones',
    'headset_mic': 'mdi6.headset',
    'headset_off': 'mdi6.headphones-off',
    'healing': 'mdi6.bandage',
    'hearing': 'mdi6.ear-hearing',
    'help': 'mdi6.help-circle',
    'help_outline': 'mdi6.help-circle-outline',
    'high_quality': 'mdi6.high-definition-box',
    'highlight': 'mdi6.marker',
    'highlight_off': 'mdi6.close-circle-outline',
    'history': 'mdi6.history',
    'home': 'mdi6.home',
    'hot_tub': 'mdi6.hot-tub',
    'hotel': 'mdi6.bed',
    'hourglass_empty': 'mdi6.timer-sand-empty',
    'hourglass_full': 'mdi6.timer-sand-full',
    'http': 'mdi6.web',
    'https': 'mdi6.lock',
    'image': 'mdi6.image',
    'image_aspect_ratio': 'mdi6.aspect-ratio',
    'import_contacts': 'mdi6.book-open-page-variant',
    'import_export': 'mdi6.swap-vertical',
    'important_devices': 'mdi6.devices',
    'inbox': 'mdi6.inbox',
    'indeterminate_check_box': 'mdi6.checkbox-intermediate',
    'info': 'mdi6.information',
    'info_outline': 'mdi6.information-outline',
    'input': 'mdi6.import',
    'insert_chart': 'mdi6.chart-bar',
    'insert_comment': 'mdi6.comment-text',
    'insert_drive_file': 'mdi6.file',
    'insert_emoticon': 'mdi6.emoticon-outline',
    'insert_invitation': 'mdi6.calendar',
    'insert_link': 'mdi6.link-variant',
    'insert_photo': 'mdi6.image',
    'invert_colors': 'mdi6.invert-colors',
    'invert_colors_off': 'mdi6.invert-colors-off',
    'iso': 'mdi6.camera-iris',
    'keyboard': 'mdi6.keyboard',
    'keyboard_arrow_down': 'mdi6.chevron-down',
    'keyboard_arrow_left': 'mdi6.chevron-left',
    'keyboard_arrow_right': 'mdi6.chevron-right',
    'keyboard_arrow_up': 'mdi6.chevron-up',
    'keyboard_backspace': 'mdi6.keyboard-backspace',
    'keyboard_capslock': 'mdi6.keyboard-caps',
    'keyboard_hide': 'mdi6.keyboard-close',
    'keyboard_return': 'mdi6.keyboard-return',
    'keyboard_tab': 'mdi6.keyboard-tab',
    'keyboard_voice': 'mdi6.microphone',
    'kitchen': 'mdi6.fridge',
    'label': 'mdi6.label',
    'label_important': 'mdi6.label-variant',
    'label_outline': 'mdi6.label-outline',
    'landscape': 'mdi6.image-filter-hdr',
    'language': 'mdi6.web',
    'laptop': 'mdi6.laptop',
    'laptop_chromebook': 'mdi6.laptop',
    'laptop_mac': 'mdi6.laptop',
    'laptop_windows': 'mdi6.laptop',
    'last_page': 'mdi6.page-last',
    'launch': 'mdi6.open-in-new',
    'layers': 'mdi6.layers',
    'layers_clear': 'mdi6.layers-off',
    'leak_add': 'mdi6.access-point',
    'leak_remove': 'mdi6.access-point-off',
    'lens': 'mdi6.circle',
    'library_add': 'mdi6.library-outline',
    'library_books': 'mdi6.library',
    'library_music': 'mdi6.music-box-multiple',
    'lightbulb_outline': 'mdi6.lightbulb-outline',
    'line_style': 'mdi6.format-line-style',
    'line_weight': 'mdi6.format-line-weight',
    'linear_scale': 'mdi6.ray-vertex',
    'link': 'mdi6.link',
    'link_off': 'mdi6.link-off',
    'linked_camera': 'mdi6.camera-wireless',
    'list': 'mdi6.format-list-bulleted',
    'live_help': 'mdi6.help-box',
    'live_tv': 'mdi6.television-classic',
    'local_activity': 'mdi6.ticket',
    'local_airport': 'mdi6.airplane',
    'local_atm': 'mdi6.cash',
    'local_bar': 'mdi6.glass-cocktail',
    'local_cafe': 'mdi6.coffee',
    'local_car_wash': 'mdi6.car-wash',
    'local_convenience_store': 'mdi6.store-24-hour',
    'local_dining': 'mdi6.silverware-fork-knife',
    'local_drink': 'mdi6.cup-water',
    'local_florist': 'mdi6.flower',
    'local_gas_station': 'mdi6.gas-station',
    'local_grocery_store': 'mdi6.cart',
    'local_hospital': 'mdi6.hospital-box',
    'local_hotel': 'mdi6.bed',
    'local_laundry_service': 'mdi6.washing-machine',
    'local_library': 'mdi6.library',
    'local_mall': 'mdi6.shopping',
    'local_movies': 'mdi6.filmstrip',
    'local_offer': 'mdi6.tag',
    'local_parking': 'mdi6.parking',
    'local_pharmacy': 'mdi6.pill',
    'local_phone': 'mdi6.phone',
    'local_pizza': 'mdi6.pizza',
    'local_play': 'mdi6.ticket',
    'local_post_office': 'mdi6.email',
    'local_printshop': 'mdi6.printer',
    'local_see': 'mdi6.camera',
    'local_shipping': 'mdi6.truck-delivery',
    'local_taxi': 'mdi6.taxi',
    'location_city': 'mdi6.city',
    'location_disabled': 'mdi6.crosshairs-off',
    'location_off': 'mdi6.map-marker-off',
    'location_on': 'mdi6.map-marker',
    'location_searching': 'mdi6.crosshairs',
    'lock': 'mdi6.lock',
    'lock_open': 'mdi6.lock-open',
    'lock_outline': 'mdi6.lock-outline',
    'looks': 'mdi6.looks',
    'looks_3': 'mdi6.numeric-3-box',
    'looks_4': 'mdi6.numeric-4-box',
    'looks_5': 'mdi6.numeric-5-box',
    'looks_6': 'mdi6.numeric-6-box',
    'looks_one': 'mdi6.numeric-1-box',
    'looks_two': 'mdi6.numeric-2-box',
    'loop': 'mdi6.sync',
    'loupe': 'mdi6.magnify-plus-outline',
    'low_priority': 'mdi6.arrow-down-bold-box-outline',
    'loyalty': 'mdi6.tag-heart',
    'mail': 'mdi6.email',
    'mail_outline': 'mdi6.email-outline',
    'map': 'mdi6.map',
    'markunread': 'mdi6.email',
    'markunread_mailbox': 'mdi6.mailbox',
    'maximize': 'mdi6.window-maximize',
    'memory': 'mdi6.memory',
    'menu': 'mdi6.menu',
    'merge_type': 'mdi6.call-merge',
    'message': 'mdi6.message-text',
    'mic': 'mdi6.microphone',
    'mic_none': 'mdi6.microphone-outline',
    'mic_off': 'mdi6.microphone-off',
    'minimize': 'mdi6.window-minimize',
    'missed_video_call': 'mdi6.video-off',
    'mms': 'mdi6.message-image',
    'mobile_screen_share': 'mdi6.monitor-share',
    'mode_comment': 'mdi6.comment',
    'mode_edit': 'mdi6.pencil',
    'monetization_on': 'mdi6.cash-multiple',
    'money_off': 'mdi6.currency-usd-off',
    'monochrome_photos': 'mdi6.camera',
    'mood': 'mdi6.emoticon-happy-outline',
    'mood_bad': 'mdi6.emoticon-sad-outline',
    'more': 'mdi6.dots-horizontal-circle',
    'more_horiz': 'mdi6.dots-horizontal',
    'more_vert': 'mdi6.dots-vertical',
    'motorcycle': 'mdi6.motorbike',
    'mouse': 'mdi6.mouse',
    'move_to_inbox': 'mdi6.inbox-arrow-down',
    'movie': 'mdi6.movie',
    'movie_creation': 'mdi6.movie-open',
    'movie_filter': 'mdi6.movie-filter',
    'multiline_chart': 'mdi6.chart-multiline',
    'music_note': 'mdi6.music-note',
    'music_video': 'mdi6.music-box',
    'my_location': 'mdi6.crosshairs-gps',
    'nature': 'mdi6.tree',
    'nature_people': 'mdi6.nature-people',
    'navigate_before': 'mdi6.chevron-left',
    'navigate_next': 'mdi6.chevron-right',
    'navigation': 'mdi6.navigation',
    'near_me': 'mdi6.near-me',
    'network_cell': 'mdi6.signal-cellular-3',
    'network_check': 'mdi6.speedometer',
    'network_locked': 'mdi6.lock-outline',
    'network_wifi': 'mdi6.wifi',
    'new_releases': 'mdi6.decagram',
    'next_week': 'mdi6.briefcase-arrow-up-down',
    'nfc': 'mdi6.nfc',
    'no_encryption': 'mdi6.lock-open-outline',
    'no_sim': 'mdi6.sim-off',
    'not_interested': 'mdi6.cancel',
    'not_listed_location': 'mdi6.map-marker-question',
    'note': 'mdi6.note',
    'note_add': 'mdi6.note-plus',
    'notification_important': 'mdi6.bell-alert',
    'notifications': 'mdi6.bell',
    'notifications_active': 'mdi6.bell-ring',
    'notifications_none': 'mdi6.bell-outline',
    'notifications_off': 'mdi6.bell-off',
    'notifications_paused': 'mdi6.bell-sleep',
    'offline_bolt': 'mdi6.lightning-bolt-circle',
    'offline_pin': 'mdi6.check-circle',
    'ondemand_video': 'mdi6.television-play',
    'opacity': 'mdi6.opacity',
    'open_in_browser': 'mdi6.open-in-app',
    'open_in_new': 'mdi6.open-in-new',
    'open_with': 'mdi6.cursor-move',
    'outlined_flag': 'mdi6.flag-outline',
    'pages': 'mdi6.file-document-multiple',
    'pageview': 'mdi6.file-find',
    'palette': 'mdi6.palette',
    'pan_tool': 'mdi6.hand-back-left',
    'panorama': 'mdi6.panorama',
    'panorama_fish_eye': 'mdi6.circle-outline',
    'panorama_horizontal': 'mdi6.panorama-horizontal',
    'panorama_vertical': 'mdi6.panorama-vertical',
    'panorama_wide_angle': 'mdi6.panorama-wide-angle',
    'party_mode': 'mdi6.camera-party-mode',
    'pause': 'mdi6.pause',
    'pause_circle_filled': 'mdi6.pause-circle',
    'pause_circle_outline': 'mdi6.pause-circle-outline',
    'payment': 'mdi6.credit-card-outline',
    'people': 'mdi6.account-multiple',
    'people_outline': 'mdi6.account-multiple-outline',
    'perm_camera_mic': 'mdi6.camera-account',
    'perm_contact_calendar': 'mdi6.calendar-account',
    'perm_data_setting': 'mdi6.database-cog',
    'perm_device_information': 'mdi6.cellphone-information',
    'perm_identity': 'mdi6.account-outline',
    'perm_media': 'mdi6.folder-multiple-image',
    'perm_phone_msg': 'mdi6.message-processing',
    'perm_scan_wifi': 'mdi6.wifi-strength-4-alert',
    'person': 'mdi6.account',
    'person_add': 'mdi6.account-plus',
    'person_outline': 'mdi6.account-outline',
    'person_pin': 'mdi6.account-box',
    'person_pin_circle': 'mdi6.map-marker-account',
    'personal_video': 'mdi6.television',
    'pets': 'mdi6.paw',
    'phone': 'mdi6.phone',
    'phone_android': 'mdi6.cellphone',
    'phone_bluetooth_speaker': 'mdi6.phone-bluetooth',
    'phone_forwarded': 'mdi6.phone-forward',
    'phone_in_talk': 'mdi6.phone-in-talk',
    'phone_iphone': 'mdi6.cellphone',
    'phone_locked': 'mdi6.phone-lock',
    'phone_missed': 'mdi6.phone-missed',
    'phone_paused': 'mdi6.phone-paused',
    'phonelink': 'mdi6.cellphone-link',
    'phonelink_erase': 'mdi6.cellphone-remove',
    'phonelink_lock': 'mdi6.cellphone-lock',
    'phonelink_off': 'mdi6.cellphone-link-off',
    'phonelink_ring': 'mdi6.cellphone-sound',
    'phonelink_setup': 'mdi6.cellphone-settings',
    'photo': 'mdi6.image',
    'photo_album': 'mdi6.image-album',
    'photo_camera': 'mdi6.camera',
    'photo_filter': 'mdi6.image-filter-vintage',
    'photo_library': 'mdi6.image-multiple',
    'photo_size_select_actual': 'mdi6.image-size-select-actual',
    'photo_size_select_large': 'mdi6.image-size-select-large',
    'photo_size_select_small': 'mdi6.image-size-select-small',
    'picture_as_pdf': 'mdi6.file-pdf-box',
    'picture_in_picture': 'mdi6.picture-in-picture-top-right',
    'picture_in_picture_alt': 'mdi6.picture-in-picture-bottom-right',
    'pie_chart': 'mdi6.chart-pie',
    'pie_chart_outlined': 'mdi6.chart-pie',
    'pin_drop': 'mdi6.map-marker-down',
    'place': 'mdi6.map-marker',
    'play_arrow': 'mdi6.play',
    'play_circle_filled': 'mdi6.play-circle',
    'play_circle_outline': 'mdi6.play-circle-outline',
    'play_for_work': 'mdi6.download',
    'playlist_add': 'mdi6.playlist-plus',
    'playlist_add_check': 'mdi6.playlist-check',
    'playlist_play': 'mdi6.playlist-play',
    'plus_one': 'mdi6.numeric-positive-1',
    'poll': 'mdi6.poll',
    'polymer': 'mdi6.hexagon-outline',
    'pool': 'mdi6.pool',
    'portable_wifi_off': 'mdi6.wifi-off',
    'portrait': 'mdi6.account-box',
    'power': 'mdi6.power-plug',
    'power_input': 'mdi6.power-plug-outline',
    'power_settings_new': 'mdi6.power',
    'pregnant_woman': 'mdi6.human-pregnant',
    'present_to_all': 'mdi6.presentation-play',
    'print': 'mdi6.printer',
    'priority_high': 'mdi6.priority-high',
    'public': 'mdi6.earth',
    'publish': 'mdi6.publish',
    'query_builder': 'mdi6.clock-outline',
    'question_answer': 'mdi6.forum',
    'queue': 'mdi6.playlist-plus',
    'queue_music': 'mdi6.playlist-music',
    'queue_play_next': 'mdi6.playlist-play',
    'radio': 'mdi6.radio',
    'radio_button_checked': 'mdi6.radiobox-marked',
    'radio_button_unchecked': 'mdi6.radiobox-blank',
    'rate_review': 'mdi6.comment-edit',
    'receipt': 'mdi6.receipt',
    'recent_actors': 'mdi6.account-multiple',
    'record_voice_over': 'mdi6.account-voice',
    'redeem': 'mdi6.gift',
    'redo': 'mdi6.redo',
    'refresh': 'mdi6.refresh',
    'remove': 'mdi6.minus',
    'remove_circle': 'mdi6.minus-circle',
    'remove_circle_outline': 'mdi6.minus-circle-outline',
    'remove_from_queue': 'mdi6.playlist-remove',
    'remove_red_eye': 'mdi6.eye',
    'remove_shopping_cart': 'mdi6.cart-remove',
    'reorder': 'mdi6.reorder-horizontal',
    'repeat': 'mdi6.repeat',
    'repeat_one': 'mdi6.repeat-once',
    'replay': 'mdi6.replay',
    'replay_10': 'mdi6.rewind-10',
    'replay_30': 'mdi6.rewind-30',
    'replay_5': 'mdi6.rewind-5',
    'reply': 'mdi6.reply',
    'reply_all': 'mdi6.reply-all',
    'report': 'mdi6.alert-octagon',
    'report_off': 'mdi6.alert-octagon-outline',
    'report_problem': 'mdi6.alert',
    'restaurant': 'mdi6.silverware-fork-knife',
    'restaurant_menu': 'mdi6.silverware',
    'restore': 'mdi6.restore',
    'restore_from_trash': 'mdi6.delete-restore',
    'restore_page': 'mdi6.file-restore',
    'ring_volume': 'mdi6.phone-ring',
    'room': 'mdi6.map-marker',
    'room_service': 'mdi6.room-service',
    'rotate_90_degrees_ccw': 'mdi6.rotate-left-variant',
    'rotate_left': 'mdi6.rotate-left',
    'rotate_right': 'mdi6.rotate-right',
    'rounded_corner': 'mdi6.vector-square',
    'router': 'mdi6.router-wireless',
    'rowing': 'mdi6.rowing',
    'rss_feed': 'mdi6.rss',
    'rv_hookup': 'mdi6.rv-truck',
    'satellite': 'mdi6.satellite-variant',
    'save': 'mdi6.content-save',
    'save_alt': 'mdi6.content-save-all',
    'scanner': 'mdi6.scanner',
    'scatter_plot': 'mdi6.chart-scatter-plot',
    'schedule': 'mdi6.clock-outline',
    'school': 'mdi6.school',
    'score': 'mdi6.chart-box-outline',
    'screen_lock_landscape': 'mdi6.screen-rotation-lock',
    'screen_lock_portrait': 'mdi6.cellphone-lock',
    'screen_lock_rotation': 'mdi6.screen-rotation-lock',
    'screen_rotation': 'mdi6.screen-rotation',
    'screen_share': 'mdi6.monitor-share',
    'sd_card': 'mdi6.sd',
    'sd_storage': 'mdi6.sd',
    'search': 'mdi6.magnify',
    'security': 'mdi6.shield',
    'select_all': 'mdi6.select-all',
    'send': 'mdi6.send',
    'sentiment_dissatisfied': 'mdi6.emoticon-sad',
    'sentiment_neutral': 'mdi6.emoticon-neutral',
    'sentiment_satisfied': 'mdi6.emoticon-happy',
    'sentiment_very_dissatisfied': 'mdi6.emoticon-cry',
    'sentiment_very_satisfied': 'mdi6.emoticon-excited',
    'settings': 'mdi6.cog',
    'settings_applications': 'mdi6.cog-box',
    'settings_backup_restore': 'mdi6.backup-restore',
    'settings_bluetooth': 'mdi6.bluetooth-settings',
    'settings_brightness': 'mdi6.brightness-6',
    'settings_cell': 'mdi6.cellphone-cog',
    'settings_ethernet': 'mdi6.ethernet',
    'settings_input_antenna': 'mdi6.antenna',
    'settings_input_component': 'mdi6.audio-input-rca',
    'settings_input_composite': 'mdi6.audio-input-rca',
    'settings_input_hdmi': 'mdi6.video-input-hdmi',
    'settings_input_svideo': 'mdi6.video-input-svideo',
    'settings_overscan': 'mdi6.overscan',
    'settings_phone': 'mdi6.phone-settings',
    'settings_power': 'mdi6.power-settings',
    'settings_remote': 'mdi6.remote',
    'settings_system_daydream': 'mdi6.weather-cloudy',
    'settings_voice': 'mdi6.microphone-settings',
    'share': 'mdi6.share-variant',
    'shop': 'mdi6.shopping',
    'shop_two': 'mdi6.shopping',
    'shopping_basket': 'mdi6.basket',
    'shopping_cart': 'mdi6.cart',
    'short_text': 'mdi6.text-short',
    'show_chart': 'mdi6.chart-line',
    'shuffle': 'mdi6.shuffle',
    'shutter_speed': 'mdi6.camera-timer',
    'signal_cellular_4_bar': 'mdi6.signal-cellular-3',
    'signal_cellular_no_sim': 'mdi6.sim-off',
    'signal_cellular_null': 'mdi6.signal-cellular-outline',
    'signal_cellular_off': 'mdi6.signal-off',
    'signal_wifi_4_bar': 'mdi6.wifi-strength-4',
    'signal_wifi_4_bar_lock': 'mdi6.wifi-strength-4-lock',
    'signal_wifi_off': 'mdi6.wifi-strength-off',
    'sim_card': 'mdi6.sim',
    'sim_card_alert': 'mdi6.sim-alert',
    'skip_next': 'mdi6.skip-next',
    'skip_previous': 'mdi6.skip-previous',
    'slideshow': 'mdi6.presentation',
    'slow_motion_video': 'mdi6.motion-play-outline',
    'smartphone': 'mdi6.cellphone',
    'smoke_free': 'mdi6.smoking-off',
    'smoking_rooms': 'mdi6.smoking',
    'sms': 'mdi6.message-text',
    'sms_failed': 'mdi6.message-alert',
    'snooze': 'mdi6.alarm-snooze',
    'sort': 'mdi6.sort',
    'sort_by_alpha': 'mdi6.sort-alphabetical-ascending',
    'spa': 'mdi6.spa',
    'space_bar': 'mdi6.keyboard-space',
    'speaker': 'mdi6.speaker',
    'speaker_group': 'mdi6.speaker-multiple',
    'speaker_notes': 'mdi6.message-text-outline',
    'speaker_notes_off': 'mdi6.message-off',
    'speaker_phone': 'mdi6.cellphone-sound',
    'spellcheck': 'mdi6.spellcheck',
    'star': 'mdi6.star',
    'star_border': 'mdi6.star-outline',
    'star_half': 'mdi6.star-half-full',
    'stars': 'mdi6.star-circle',
    'stay_current_landscape': 'mdi6.cellphone',
    'stay_current_portrait': 'mdi6.cellphone',
    'stay_primary_landscape': 'mdi6.cellphone',
    'stay_primary_portrait': 'mdi6.cellphone',
    'stop': 'mdi6.stop',
    'stop_screen_share': 'mdi6.monitor-off',
    'storage': 'mdi6.server',
    'store': 'mdi6.store',
    'store_mall_directory': 'mdi6.store',
    'straighten': 'mdi6.ruler',
    'streetview': 'mdi6.walk',
    'strikethrough_s': 'mdi6.format-strikethrough-variant',
    'style': 'mdi6.palette-swatch',
    'subdirectory_arrow_left': 'mdi6.subdirectory-arrow-left',
    'subdirectory_arrow_right': 'mdi6.subdirectory-arrow-right',
    'subject': 'mdi6.text',
    'subscriptions': 'mdi6.youtube-subscription',
    'subtitles': 'mdi6.subtitles',
    'subway': 'mdi6.subway-variant',
    'supervised_user_circle': 'mdi6.account-supervisor-circle',
    'supervisor_account': 'mdi6.account-supervisor',
    'surround_sound': 'mdi6.surround-sound',
    'swap_calls': 'mdi6.swap-horizontal',
    'swap_horiz': 'mdi6.swap-horizontal',
    'swap_horizontal_circle': 'mdi6.swap-horizontal',
    'swap_vert': 'mdi6.swap-vertical',
    'swap_vertical_circle': 'mdi6.swap-vertical',
    'switch_camera': 'mdi6.camera-switch',
    'switch_video': 'mdi6.video-switch',
    'sync': 'mdi6.sync',
    'sync_disabled': 'mdi6.sync-off',
    'sync_problem': 'mdi6.sync-alert',
    'system_update': 'mdi6.cellphone-arrow-down',
    'system_update_alt': 'mdi6.download',
    'tab': 'mdi6.tab',
    'tab_unselected': 'mdi6.tab-unselected',
    'table_chart': 'mdi6.table-large',
    'tablet': 'mdi6.tablet',
    'tablet_android': 'mdi6.tablet',
    'tablet_mac': 'mdi6.tablet',
    'tag_faces': 'mdi6.emoticon-outline',
    'tap_and_play': 'mdi6.cellphone-wireless',
    'terrain': 'mdi6.terrain',
    'text_fields': 'mdi6.format-text',
    'text_format': 'mdi6.format-text',
    'text_rotate_up': 'mdi6.format-text-rotation-up',
    'text_rotate_vertical': 'mdi6.format-text-rotation-vertical',
    'text_rotation_angledown': 'mdi6.format-text-rotation-angle-down',
    'text_rotation_angleup': 'mdi6.format-text-rotation-angle-up',
    'text_rotation_down': 'mdi6.format-text-rotation-down',
    'text_rotation_none': 'mdi6.format-text-rotation-none',
    'textsms': 'mdi6.message-text',
    'texture': 'mdi6.texture',
    'theaters': 'mdi6.filmstrip',
    'thumb_down': 'mdi6.thumb-down',
    'thumb_up': 'mdi6.thumb-up',
    'thumbs_up_down': 'mdi6.thumbs-up-down',
    'time_to_leave': 'mdi6.car',
    'timelapse': 'mdi6.timelapse',
    'timeline': 'mdi6.chart-timeline-variant',
    'timer': 'mdi6.timer-outline',
    'timer_10': 'mdi6.timer-10',
    'timer_3': 'mdi6.timer-3',
    'timer_off': 'mdi6.timer-off-outline',
    'title': 'mdi6.format-title',
    'toc': 'mdi6.table-of-contents',
    'today': 'mdi6.calendar-today',
    'toll': 'mdi6.ticket',
    'tonality': 'mdi6.circle-half-full',
    'touch_app': 'mdi6.gesture-tap',
    'toys': 'mdi6.teddy-bear',
    'track_changes': 'mdi6.radar',
    'traffic': 'mdi6.traffic-light',
    'train': 'mdi6.train',
    'tram': 'mdi6.tram',
    'transfer_within_a_station': 'mdi6.transit-transfer',
    'transform': 'mdi6.transfer',
    'transit_enterexit': 'mdi6.transit-connection-variant',
    'translate': 'mdi6.translate',
    'trending_down': 'mdi6.trending-down',
    'trending_flat': 'mdi6.trending-neutral',
    'trending_up': 'mdi6.trending-up',
    'trip_origin': 'mdi6.circle-outline',
    'tune': 'mdi6.tune',
    'turned_in': 'mdi6.bookmark',
    'turned_in_not': 'mdi6.bookmark-outline',
    'tv': 'mdi6.television',
    'unarchive': 'mdi6.package-up',
    'undo': 'mdi6.undo',
    'unfold_less': 'mdi6.unfold-less-horizontal',
    'unfold_more': 'mdi6.unfold-more-horizontal',
    'update': 'mdi6.update',
    'usb': 'mdi6.usb',
    'verified_user': 'mdi6.shield-check',
    'vertical_align_bottom': 'mdi6.format-vertical-align-bottom',
    'vertical_align_center': 'mdi6.format-vertical-align-center',
    'vertical_align_top': 'mdi6.format-vertical-align-top',
    'vibration': 'mdi6.vibrate',
    'video_call': 'mdi6.video-plus',
    'video_label': 'mdi6.video-box',
    'video_library': 'mdi6.filmstrip-box-multiple',
    'videocam': 'mdi6.video',
    'videocam_off': 'mdi6.video-off',
    'videogame_asset': 'mdi6.gamepad-variant',
    'view_agenda': 'mdi6.view-agenda',
    'view_array': 'mdi6.view-array',
    'view_carousel': 'mdi6.view-carousel',
    'view_column': 'mdi6.view-column',
    'view_comfy': 'mdi6.view-comfy',
    'view_compact': 'mdi6.view-compact',
    'view_day': 'mdi6.view-day',
    'view_headline': 'mdi6.view-headline',
    'view_list': 'mdi6.view-list',
    'view_module': 'mdi6.view-module',
    'view_quilt': 'mdi6.view-quilt',
    'view_stream': 'mdi6.view-stream',
    'view_week': 'mdi6.view-week',
    'vignette': 'mdi6.camera-metering-center',
    'visibility': 'mdi6.eye',
    'visibility_off': 'mdi6.eye-off',
    'voice_chat': 'mdi6.message-video',
    'voicemail': 'mdi6.voicemail',
    'volume_down': 'mdi6.volume-medium',
    'volume_mute': 'mdi6.volume-mute',
    'volume_off': 'mdi6.volume-off',
    'volume_up': 'mdi6.volume-high',
    'vpn_key': 'mdi6.key',
    'vpn_lock': 'mdi6.earth',
    'wallpaper': 'mdi6.wallpaper',
    'warning': 'mdi6.alert',
    'watch': 'mdi6.watch',
    'watch_later': 'mdi6.clock',
    'wb_auto': 'mdi6.white-balance-auto',
    'wb_cloudy': 'mdi6.weather-cloudy',
    'wb_incandescent': 'mdi6.white-balance-incandescent',
    'wb_iridescent': 'mdi6.white-balance-iridescent',
    'wb_sunny': 'mdi6.weather-sunny',
    'wc': 'mdi6.human-male-female',
    'web': 'mdi6.web',
    'web_asset': 'mdi6.application-outline',
    'weekend': 'mdi6.sofa',
    'whatshot': 'mdi6.fire',
    'widgets': 'mdi6.widgets',
    'wifi': 'mdi6.wifi',
    'wifi_lock': 'mdi6.wifi-lock',
    'wifi_tethering': 'mdi6.access-point-network',
    'work': 'mdi6.briefcase',
    'wrap_text': 'mdi6.wrap',
    'youtube_searched_for': 'mdi6.history',
    'zoom_in': 'mdi6.magnify-plus',
    'zoom_out': 'mdi6.magnify-minus',
    'zoom_out_map': 'mdi6.arrow-expand-all',
}
